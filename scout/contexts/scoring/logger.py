"""
Scoring context logger.

Provides logging interface for the scoring context with automatic [score] prefix.
All scoring modules should import from this module, not from utils.logger directly.
"""

from typing import Mapping, Sequence

from loguru import logger

CONTEXT_PREFIX = "[score]"


def _log_info(message: str) -> None:
    """Log info message with [score] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [score] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [score] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scoring-specific logging helpers


def log_keyword_match(score: float, found: Sequence[str], missing: Sequence[str]) -> None:
    """Log required-skill coverage."""
    _log_debug(f"Keyword match: {score:.1f}% ({len(found)} found, {len(missing)} missing)")
    if missing:
        _log_debug(f"  Missing: {', '.join(missing)}")


def log_formatting_result(score: int, deductions: Sequence[str]) -> None:
    """Log formatting score with each fired deduction."""
    _log_debug(f"Formatting score: {score}")
    for deduction in deductions:
        _log_debug(f"  Deduction: {deduction}")


def log_analysis_start(text_length: int, num_skills: int, require_gpa: bool) -> None:
    """Log the inputs of one analysis."""
    _log_info(f"Analyzing resume ({text_length} chars) against {num_skills} required skills")
    if require_gpa:
        _log_debug("  GPA requirement enabled")


def log_analysis_result(ats_score: int, section_scores: Mapping[str, int], num_suggestions: int) -> None:
    """Log the final score breakdown."""
    breakdown = ", ".join(f"{area}={score}" for area, score in section_scores.items())
    _log_debug(f"Sub-scores: {breakdown}")
    _log_success(f"ATS score: {ats_score} ({num_suggestions} suggestions)")
