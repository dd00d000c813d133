"""Unit tests for formatting-quality checks."""

from dataclasses import replace

import pytest

from scout.contexts.scoring.config import DEFAULT_SCORING_CONFIG
from scout.contexts.scoring.formatting import (
    FormattingMessages,
    check_formatting,
    has_double_blank_line,
    is_bullet_line,
    is_header_line,
)
from scout.utils.text_processing import split_lines

# Long enough, with a header, a bullet and a contact, single-spaced
CLEAN_RESUME = (
    "Jane Doe\n"
    "jane@doe.dev\n"
    "\n"
    "EXPERIENCE\n"
    "- Developed services\n"
) + "Filler line describing work in more detail.\n" * 8


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [
        ("EDUCATION", True),
        ("WORK EXPERIENCE:", True),
        ("2019 - 2021", True),
        ("Education", False),
        ("", False),
    ],
)
def test_is_header_line(line, expected):
    """Test that lines without lowercase letters count as headers."""
    assert is_header_line(line) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, expected",
    [
        ("- item", True),
        ("* item", True),
        ("• item", True),
        ("→ Led migration", True),
        ("item - with dash", False),
    ],
)
def test_is_bullet_line(line, expected):
    assert is_bullet_line(line) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("a\n\n\nb", True),
        ("a\n \n\t\nb", True),
        ("a\n\nb", False),
        ("a\n\n", False),
        ("", False),
    ],
)
def test_has_double_blank_line(text, expected):
    """Test spacing detection, including the trailing-newline case."""
    assert has_double_blank_line(split_lines(text)) == expected


@pytest.mark.unit
def test_clean_resume_scores_100():
    result = check_formatting(CLEAN_RESUME)

    assert len(CLEAN_RESUME) >= 300
    assert result.score == 100
    assert result.deductions == ()
    assert result.is_clean


class TestSingleDeductions:
    """Test each check firing on its own."""

    @pytest.mark.unit
    def test_too_short(self):
        result = check_formatting("JANE\njane@doe.dev\n- Python")
        assert result.score == 70
        assert result.deductions == (FormattingMessages.TOO_SHORT,)

    @pytest.mark.unit
    def test_no_section_headers(self):
        result = check_formatting(CLEAN_RESUME.replace("EXPERIENCE", "Experience"))
        assert result.score == 80
        assert result.deductions == (FormattingMessages.NO_SECTION_HEADERS,)

    @pytest.mark.unit
    def test_no_bullets(self):
        result = check_formatting(CLEAN_RESUME.replace("- Developed", "Developed"))
        assert result.score == 80
        assert result.deductions == (FormattingMessages.NO_BULLETS,)

    @pytest.mark.unit
    def test_inconsistent_spacing(self):
        result = check_formatting(CLEAN_RESUME.replace("\n\nEXPERIENCE", "\n\n\nEXPERIENCE"))
        assert result.score == 85
        assert result.deductions == (FormattingMessages.INCONSISTENT_SPACING,)

    @pytest.mark.unit
    def test_missing_contact(self):
        result = check_formatting(CLEAN_RESUME.replace("jane@doe.dev", "jane at doe dot dev"))
        assert result.score == 85
        assert result.deductions == (FormattingMessages.MISSING_CONTACT,)

    @pytest.mark.unit
    def test_phone_counts_as_contact(self):
        result = check_formatting(CLEAN_RESUME.replace("jane@doe.dev", "555-867-5309"))
        assert result.is_clean


@pytest.mark.unit
def test_all_deductions_floor_at_zero():
    """Test that all five checks fire in order and the score stops at 0."""
    result = check_formatting("hello\n\n\nworld")

    assert result.score == 0
    assert result.deductions == (
        FormattingMessages.TOO_SHORT,
        FormattingMessages.NO_SECTION_HEADERS,
        FormattingMessages.NO_BULLETS,
        FormattingMessages.INCONSISTENT_SPACING,
        FormattingMessages.MISSING_CONTACT,
    )


@pytest.mark.unit
def test_empty_text():
    """Test that empty text fails every check except spacing."""
    result = check_formatting("")

    assert result.score == 15
    assert FormattingMessages.INCONSISTENT_SPACING not in result.deductions
    assert len(result.deductions) == 4


@pytest.mark.unit
def test_configured_deductions():
    """Test that deduction amounts and the minimum length come from config."""
    config = replace(
        DEFAULT_SCORING_CONFIG,
        min_length=10,
        deductions=replace(DEFAULT_SCORING_CONFIG.deductions, no_bullets=90, missing_contact=50),
    )
    result = check_formatting("JANE DOE\nno bullets here", config)

    assert result.deductions == (FormattingMessages.NO_BULLETS, FormattingMessages.MISSING_CONTACT)
    assert result.score == 0
