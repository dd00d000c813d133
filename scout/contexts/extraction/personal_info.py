"""
Personal information extraction for the Extraction context.

Extraction is best-effort and total: every field falls back to an empty string
(or "Unknown" for the name) when nothing matches. Absence is never an error.
"""

import re
from dataclasses import asdict, dataclass
from typing import Dict

from scout.contexts.extraction.logger import log_personal_info
from scout.contexts.extraction.patterns import ContactPatterns
from scout.utils.text_processing import split_lines, trim

UNKNOWN_NAME = "Unknown"

CONTACT_FIELDS = ("email", "phone", "linkedin", "github", "codeforces")


@dataclass(frozen=True)
class PersonalInfo:
    """
    Contact details of the candidate.

    Empty strings mean "not found".
    """

    name: str = UNKNOWN_NAME
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    codeforces: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def _first_match(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return trim(match.group(0)) if match else ""


def guess_name(text: str) -> str:
    """
    Guess the candidate's name as the first non-blank line.

    Args:
        text: Raw resume text

    Returns:
        Trimmed first non-blank line, or "Unknown"
    """
    for line in split_lines(text):
        candidate = trim(line)
        if candidate:
            return candidate
    return UNKNOWN_NAME


def extract_personal_info(text: str) -> PersonalInfo:
    """
    Extract name and contact fields from raw resume text.

    Each contact field holds the first match of its pattern in document order:
    - email: local@domain.tld
    - phone: 10-digit number, optionally grouped and with a +CC prefix
    - linkedin: linkedin.com/in/<handle>
    - github: github.com/<handle>
    - codeforces: codeforces.com/profile/<handle>

    Args:
        text: Raw resume text

    Returns:
        PersonalInfo with empty strings for fields that were not found

    Example:
        >>> info = extract_personal_info("Jane Doe\\njane@doe.dev | github.com/janedoe")
        >>> info.name, info.email, info.github
        ('Jane Doe', 'jane@doe.dev', 'github.com/janedoe')
    """
    info = PersonalInfo(
        name=guess_name(text),
        email=_first_match(ContactPatterns.EMAIL, text),
        phone=_first_match(ContactPatterns.PHONE, text),
        linkedin=_first_match(ContactPatterns.LINKEDIN, text),
        github=_first_match(ContactPatterns.GITHUB, text),
        codeforces=_first_match(ContactPatterns.CODEFORCES, text),
    )

    found = [name for name in CONTACT_FIELDS if getattr(info, name)]
    missing = [name for name in CONTACT_FIELDS if not getattr(info, name)]
    log_personal_info(info.name, found, missing)

    return info
