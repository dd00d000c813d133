"""
Extraction context logger.

Provides logging interface for the extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from utils.logger directly.
"""

from typing import Sequence

from loguru import logger

from scout.utils.text_processing import truncate_display

CONTEXT_PREFIX = "[extract]"


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_personal_info(name: str, found_fields: Sequence[str], missing_fields: Sequence[str]) -> None:
    """Log which contact fields were recognized."""
    _log_debug(f"Name guess: {name!r}")
    _log_debug(f"  Found: {', '.join(found_fields) or '(none)'}")
    if missing_fields:
        _log_debug(f"  Missing: {', '.join(missing_fields)}")


def log_segmentation_result(section_type: str, entries: Sequence[str]) -> None:
    """Log the entries one segmenter produced."""
    _log_debug(f"{section_type}: {len(entries)} entries")
    for i, entry in enumerate(entries, 1):
        _log_debug(f"  Entry {i}: {truncate_display(entry, 80)}")
