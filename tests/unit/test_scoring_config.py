"""Unit tests for scoring configuration loading."""

import pytest

from scout.contexts.scoring.config import (
    CONFIG_ENV_VAR,
    DEFAULT_SCORING_CONFIG,
    ScoreWeights,
    ScoringConfig,
    load_scoring_config,
)
from scout.contexts.scoring.exceptions import ScoringConfigError


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.mark.unit
def test_defaults():
    """Test default weights, deductions and penalty."""
    config = load_scoring_config()

    assert config == DEFAULT_SCORING_CONFIG
    assert config.weights == ScoreWeights(0.1, 0.35, 0.25, 0.1, 0.2)
    assert config.deductions.too_short == 30
    assert config.suggestion_penalty == 25
    assert config.min_length == 300
    assert config.clamp_subscores is False


@pytest.mark.unit
def test_partial_override(tmp_path):
    """Test that unspecified values keep their defaults."""
    config_file = tmp_path / "scoring.yaml"
    config_file.write_text("weights:\n  skills: 0.5\nclamp_subscores: true\n")

    config = load_scoring_config(config_file)

    assert isinstance(config, ScoringConfig)
    assert config.weights.skills == 0.5
    assert config.weights.contact == 0.1
    assert config.clamp_subscores is True
    assert config.deductions == DEFAULT_SCORING_CONFIG.deductions


@pytest.mark.unit
def test_integer_weight_becomes_float(tmp_path):
    config_file = tmp_path / "scoring.yaml"
    config_file.write_text("weights:\n  format: 0\n")

    config = load_scoring_config(config_file)

    assert config.weights.format == 0.0
    assert isinstance(config.weights.format, float)


@pytest.mark.unit
def test_env_var_path(tmp_path, monkeypatch):
    config_file = tmp_path / "scoring.yaml"
    config_file.write_text("min_length: 200\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

    assert load_scoring_config().min_length == 200


@pytest.mark.unit
def test_empty_file_gives_defaults(tmp_path):
    config_file = tmp_path / "scoring.yaml"
    config_file.write_text("")

    assert load_scoring_config(config_file) == DEFAULT_SCORING_CONFIG


class TestInvalidConfig:
    """Test that bad overrides raise ScoringConfigError."""

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(ScoringConfigError, match="not found"):
            load_scoring_config(tmp_path / "nope.yaml")

    @pytest.mark.unit
    def test_unknown_key(self, tmp_path):
        config_file = tmp_path / "scoring.yaml"
        config_file.write_text("weights:\n  skils: 0.5\n")

        with pytest.raises(ScoringConfigError) as exc_info:
            load_scoring_config(config_file)

        assert exc_info.value.key == "weights.skils"
        assert exc_info.value.config_path == config_file

    @pytest.mark.unit
    def test_wrong_type(self, tmp_path):
        config_file = tmp_path / "scoring.yaml"
        config_file.write_text("min_length: short\n")

        with pytest.raises(ScoringConfigError) as exc_info:
            load_scoring_config(config_file)

        assert exc_info.value.key == "min_length"

    @pytest.mark.unit
    def test_section_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "scoring.yaml"
        config_file.write_text("deductions: 5\n")

        with pytest.raises(ScoringConfigError, match="mapping"):
            load_scoring_config(config_file)

    @pytest.mark.unit
    def test_negative_weight(self, tmp_path):
        config_file = tmp_path / "scoring.yaml"
        config_file.write_text("weights:\n  contact: -0.1\n")

        with pytest.raises(ScoringConfigError) as exc_info:
            load_scoring_config(config_file)

        assert exc_info.value.key == "weights.contact"

    @pytest.mark.unit
    def test_malformed_yaml(self, tmp_path):
        config_file = tmp_path / "scoring.yaml"
        config_file.write_text("weights: [unclosed\n")

        with pytest.raises(ScoringConfigError):
            load_scoring_config(config_file)
