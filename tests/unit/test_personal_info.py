"""Unit tests for name and contact extraction."""

import pytest

from scout.contexts.extraction.personal_info import (
    UNKNOWN_NAME,
    PersonalInfo,
    extract_personal_info,
    guess_name,
)


class TestGuessName:
    """Test name guessing from the first non-blank line."""

    @pytest.mark.unit
    def test_first_line(self):
        assert guess_name("Jane Doe\nSoftware Engineer") == "Jane Doe"

    @pytest.mark.unit
    def test_skips_leading_blank_lines(self):
        assert guess_name("\n\n   \n  Jane Doe  \nEngineer") == "Jane Doe"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", "\n", "   \n\t\n"])
    def test_unknown_when_blank(self, text):
        assert guess_name(text) == UNKNOWN_NAME


class TestContactFields:
    """Test contact field patterns."""

    @pytest.mark.unit
    def test_all_fields(self):
        """Test extraction of every contact field."""
        text = (
            "Jane Doe\n"
            "jane.doe@example.com | 555-867-5309\n"
            "https://www.linkedin.com/in/jane-doe-123/\n"
            "https://github.com/janedoe\n"
            "https://codeforces.com/profile/tourist\n"
        )
        info = extract_personal_info(text)

        assert info == PersonalInfo(
            name="Jane Doe",
            email="jane.doe@example.com",
            phone="555-867-5309",
            linkedin="linkedin.com/in/jane-doe-123",
            github="github.com/janedoe",
            codeforces="codeforces.com/profile/tourist",
        )

    @pytest.mark.unit
    def test_no_fields(self):
        """Test that missing fields are empty strings, never errors."""
        info = extract_personal_info("Just a name\nand some text")

        assert info.name == "Just a name"
        for field_name in ("email", "phone", "linkedin", "github", "codeforces"):
            assert getattr(info, field_name) == ""

    @pytest.mark.unit
    def test_empty_text(self):
        """Test extraction from empty text."""
        assert extract_personal_info("") == PersonalInfo()

    @pytest.mark.unit
    def test_email_with_multi_part_domain(self):
        info = extract_personal_info("Contact: first.last@mail.co.uk")
        assert info.email == "first.last@mail.co.uk"

    @pytest.mark.unit
    def test_first_email_wins(self):
        info = extract_personal_info("a@first.com\nb@second.com")
        assert info.email == "a@first.com"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Phone: +91 7042366960", "+91 7042366960"),
            ("Phone: (555) 123-4567", "(555) 123-4567"),
            ("Phone: 555.123.4567", "555.123.4567"),
            ("Phone: 5551234567", "5551234567"),
        ],
    )
    def test_phone_formats(self, text, expected):
        """Test that phone matches are trimmed of surrounding whitespace."""
        assert extract_personal_info(text).phone == expected

    @pytest.mark.unit
    def test_linkedin_requires_profile_path(self):
        """Test that a bare company page is not a LinkedIn profile."""
        assert extract_personal_info("linkedin.com/company/acme").linkedin == ""


@pytest.mark.unit
def test_personal_info_to_dict():
    """Test plain dict conversion keeps field order."""
    info = PersonalInfo(name="Jane Doe", email="jane@doe.dev")
    data = info.to_dict()

    assert list(data) == ["name", "email", "phone", "linkedin", "github", "codeforces"]
    assert data["email"] == "jane@doe.dev"
    assert data["phone"] == ""
