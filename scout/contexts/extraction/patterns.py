"""
Reusable regex patterns for resume text analysis.

Pattern classes follow the convention of frozen dataclasses holding compiled
class-level constants, with convenience collections built from them below.

Word characters are ASCII-only (re.ASCII) so that handles and e-mail addresses
stop at accented letters and typographic punctuation the same way every time.
"""

import re
from dataclasses import dataclass

from scout.contexts.extraction.vocabulary import ACTION_VERBS, DEGREE_MARKERS, GRADE_MARKERS

# =============================================================================
# CONTACT EXTRACTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Patterns for pulling contact fields out of a resume.

    The first match in document order wins for every field.
    """

    # local@domain.tld
    EMAIL: re.Pattern = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)

    # 10 digits grouped 3-3-4 by "-", "." or spaces, optional (area code) and +CC
    PHONE: re.Pattern = re.compile(
        r"(\+\d{1,3}[-.]?)?\s*\(?\d{3}\)?[-.]?\s*\d{3}[-.]?\s*\d{4}", re.ASCII
    )

    LINKEDIN: re.Pattern = re.compile(r"linkedin\.com/in/[\w-]+", re.ASCII)
    GITHUB: re.Pattern = re.compile(r"github\.com/[\w-]+", re.ASCII)
    CODEFORCES: re.Pattern = re.compile(r"codeforces\.com/profile/[\w-]+", re.ASCII)


# =============================================================================
# CONTACT FORMATTING PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactFormatPatterns:
    """
    Stricter patterns used by the formatting check.

    Contact information only counts as "properly formatted" when it stands on
    word boundaries and the phone number is written without spaces.
    """

    EMAIL: re.Pattern = re.compile(r"\b[\w.-]+@[\w.-]+\.\w+\b", re.ASCII)
    PHONE: re.Pattern = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII)
    LINKEDIN: re.Pattern = re.compile(r"linkedin\.com/\w+", re.ASCII)


CONTACT_FORMAT_PATTERNS = [
    ContactFormatPatterns.EMAIL,
    ContactFormatPatterns.PHONE,
    ContactFormatPatterns.LINKEDIN,
]


# =============================================================================
# ENTRY QUALITY PATTERNS
# =============================================================================


def _word_alternation(words) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


@dataclass(frozen=True)
class EntryPatterns:
    """
    Patterns for judging the content of extracted section entries.

    ACTION_VERB, DEGREE and GRADE are meant to be searched in case-folded text.
    """

    # A year between 1900 and 2099
    YEAR: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b", re.ASCII)

    # Bullet glyph anywhere in the entry (entries are joined lines)
    BULLET: re.Pattern = re.compile(r"[•\-*]")

    ACTION_VERB: re.Pattern = re.compile(_word_alternation(ACTION_VERBS))
    DEGREE: re.Pattern = re.compile(_word_alternation(DEGREE_MARKERS))
    GRADE: re.Pattern = re.compile(_word_alternation(GRADE_MARKERS))


# =============================================================================
# LAYOUT CONSTANTS
# =============================================================================

# A line starting with one of these is a bulleted line
BULLET_PREFIXES = ("-", "*", "•", "→")
