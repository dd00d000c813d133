"""
Scoring configuration.

The defaults reproduce the standard scoring rules exactly. An optional YAML
file can override individual values; it is merged onto the defaults key by
key, so misspelled keys and mistyped values fail loudly instead of being ignored.

Example override (scoring.yaml):

    weights:
      skills: 0.4
      format: 0.15
    clamp_subscores: true
"""

import os
from dataclasses import asdict, dataclass, field, fields, is_dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from scout.contexts.scoring.exceptions import ScoringConfigError

load_dotenv()

CONFIG_ENV_VAR = "SCOUT_SCORING_CONFIG"


@dataclass(frozen=True)
class ScoreWeights:
    """Weight of each sub-score in the final ATS score."""

    contact: float = 0.1
    skills: float = 0.35
    experience: float = 0.25
    education: float = 0.1
    format: float = 0.2


@dataclass(frozen=True)
class FormattingDeductions:
    """Points removed from the formatting score by each failed check."""

    too_short: int = 30
    no_section_headers: int = 20
    no_bullets: int = 20
    inconsistent_spacing: int = 15
    missing_contact: int = 15


@dataclass(frozen=True)
class ScoringConfig:
    """
    Tunable numbers of the scoring pipeline.

    Attributes:
        weights: Aggregation weights for the five sub-scores
        deductions: Formatting penalties, applied at most once each
        suggestion_penalty: Points a contact/experience/education sub-score
            loses per suggestion emitted for that area
        clamp_subscores: Clamp contact/experience/education sub-scores to [0, 100]
        min_length: Resumes shorter than this many characters are "too short"
    """

    weights: ScoreWeights = field(default_factory=ScoreWeights)
    deductions: FormattingDeductions = field(default_factory=FormattingDeductions)
    suggestion_penalty: int = 25
    clamp_subscores: bool = False
    min_length: int = 300


DEFAULT_SCORING_CONFIG = ScoringConfig()


def _coerce(value: Any, expected: type, config_path: Path, key: str) -> Any:
    """Check an override value against the type of the default it replaces."""
    if expected is bool:
        if isinstance(value, bool):
            return value
    elif expected is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif expected is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    raise ScoringConfigError(
        f"Expected {expected.__name__}, got {type(value).__name__} ({value!r})", config_path, key
    )


def _merge_overrides(defaults: Any, overrides: Dict[str, Any], config_path: Path, prefix: str = "") -> Any:
    """
    Return a copy of a config dataclass with overrides applied.

    Nested dataclasses (weights, deductions) are merged recursively so a file
    only needs to list the values it changes.
    """
    known = {f.name for f in fields(defaults)}
    changes = {}
    for key, value in overrides.items():
        full_key = f"{prefix}{key}"
        if key not in known:
            raise ScoringConfigError("Unknown config key", config_path, full_key)

        current = getattr(defaults, key)
        if is_dataclass(current):
            if not isinstance(value, dict):
                raise ScoringConfigError("Expected a mapping", config_path, full_key)
            changes[key] = _merge_overrides(current, value, config_path, f"{full_key}.")
        else:
            changes[key] = _coerce(value, type(current), config_path, full_key)

    return replace(defaults, **changes)


def _validate(config: ScoringConfig, config_path: Optional[Path]) -> None:
    """Reject values that would make scores meaningless."""
    for name, value in asdict(config.weights).items():
        if value < 0:
            raise ScoringConfigError(
                f"Weight must be non-negative, got {value}", config_path, f"weights.{name}"
            )
    for name, value in asdict(config.deductions).items():
        if value < 0:
            raise ScoringConfigError(
                f"Deduction must be non-negative, got {value}", config_path, f"deductions.{name}"
            )
    if config.suggestion_penalty < 0:
        raise ScoringConfigError(
            f"Penalty must be non-negative, got {config.suggestion_penalty}",
            config_path,
            "suggestion_penalty",
        )
    if config.min_length < 0:
        raise ScoringConfigError(
            f"Minimum length must be non-negative, got {config.min_length}",
            config_path,
            "min_length",
        )


def load_scoring_config(config_path: Optional[Union[str, Path]] = None) -> ScoringConfig:
    """
    Load scoring configuration, applying an optional YAML override.

    Resolution order:
    1. config_path argument
    2. SCOUT_SCORING_CONFIG environment variable (.env supported)
    3. Built-in defaults

    Args:
        config_path: Optional path to a YAML override file

    Returns:
        ScoringConfig with overrides applied

    Raises:
        ScoringConfigError: If the file is missing, unparsable, contains unknown
            keys, or sets a negative value
    """
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if not env_path:
            return DEFAULT_SCORING_CONFIG
        config_path = env_path

    config_path = Path(config_path)
    if not config_path.is_file():
        raise ScoringConfigError("Scoring config file not found", config_path)

    try:
        override = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except OmegaConfBaseException as e:
        key = getattr(e, "full_key", None)
        message = getattr(e, "msg", None) or str(e)
        raise ScoringConfigError(f"Invalid scoring config: {message}", config_path, key) from e
    except yaml.YAMLError as e:
        raise ScoringConfigError(f"Could not read scoring config: {e}", config_path) from e

    if override is None:
        override = {}
    if not isinstance(override, dict):
        raise ScoringConfigError("Scoring config must be a mapping", config_path)

    config = _merge_overrides(DEFAULT_SCORING_CONFIG, override, config_path)
    _validate(config, config_path)
    return config
