"""Custom exceptions for the scoring context."""

from pathlib import Path
from typing import Optional


class ScoringConfigError(Exception):
    """
    Exception raised when a scoring configuration override is invalid.

    Attributes:
        message: Error description
        config_path: Path to the YAML override that failed to load
        key: Dotted key that caused the failure, if known
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.key = key

        parts = [message]
        if key:
            parts.append(f"Key: {key}")
        if config_path:
            parts.append(f"Config file: {config_path}")

        super().__init__("\n".join(parts))
