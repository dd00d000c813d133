"""
Formatting-quality checks for the Scoring context.

Starts from 100 and applies five independent deductions, each at most once and
always in the same order, so the deduction messages can double as suggestions.
"""

from typing import Callable, List, Sequence, Tuple

from scout.contexts.extraction.patterns import BULLET_PREFIXES, CONTACT_FORMAT_PATTERNS
from scout.contexts.scoring.analysis_data_structures import FormattingCheckResult
from scout.contexts.scoring.config import DEFAULT_SCORING_CONFIG, ScoringConfig
from scout.contexts.scoring.logger import log_formatting_result
from scout.utils.text_processing import split_lines, trim


class FormattingMessages:
    """Deduction messages, one per check."""

    TOO_SHORT = "Resume is too short"
    NO_SECTION_HEADERS = "No clear section headers found"
    NO_BULLETS = "No bullet points found for listing details"
    INCONSISTENT_SPACING = "Inconsistent spacing between sections"
    MISSING_CONTACT = "Missing or improperly formatted contact information"


def is_header_line(trimmed_line: str) -> bool:
    """
    True for a non-empty line with no lowercase letters ("EDUCATION", "2019 - 2021").
    """
    return bool(trimmed_line) and all(not c.isalpha() or c.isupper() for c in trimmed_line)


def is_bullet_line(trimmed_line: str) -> bool:
    """True for a line that starts with "-", "*", "•" or "→"."""
    return trimmed_line.startswith(BULLET_PREFIXES)


def has_section_headers(lines: Sequence[str]) -> bool:
    return any(is_header_line(trim(line)) for line in lines)


def has_bullets(lines: Sequence[str]) -> bool:
    return any(is_bullet_line(trim(line)) for line in lines)


def has_double_blank_line(lines: Sequence[str]) -> bool:
    """True if two consecutive lines are blank after trimming."""
    return any(not trim(first) and not trim(second) for first, second in zip(lines, lines[1:]))


def has_formatted_contact(text: str) -> bool:
    """True if the text holds an e-mail, a phone number or a LinkedIn URL."""
    return any(pattern.search(text) for pattern in CONTACT_FORMAT_PATTERNS)


def check_formatting(
    text: str, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> FormattingCheckResult:
    """
    Run all formatting checks on raw resume text.

    Checks, in order:
    1. Length below config.min_length characters
    2. No all-caps header line
    3. No bulleted line
    4. Two consecutive blank lines
    5. No recognizable e-mail, phone or LinkedIn URL

    Args:
        text: Raw resume text
        config: Scoring configuration (deduction amounts, minimum length)

    Returns:
        FormattingCheckResult with the floored score and fired deductions
    """
    lines = split_lines(text)
    deductions = config.deductions

    checks: List[Tuple[Callable[[], bool], int, str]] = [
        (lambda: len(text) < config.min_length, deductions.too_short, FormattingMessages.TOO_SHORT),
        (
            lambda: not has_section_headers(lines),
            deductions.no_section_headers,
            FormattingMessages.NO_SECTION_HEADERS,
        ),
        (lambda: not has_bullets(lines), deductions.no_bullets, FormattingMessages.NO_BULLETS),
        (
            lambda: has_double_blank_line(lines),
            deductions.inconsistent_spacing,
            FormattingMessages.INCONSISTENT_SPACING,
        ),
        (
            lambda: not has_formatted_contact(text),
            deductions.missing_contact,
            FormattingMessages.MISSING_CONTACT,
        ),
    ]

    score = 100
    fired: List[str] = []
    for failed, penalty, message in checks:
        if failed():
            score -= penalty
            fired.append(message)

    score = max(0, score)
    log_formatting_result(score, fired)
    return FormattingCheckResult(score=score, deductions=tuple(fired))
