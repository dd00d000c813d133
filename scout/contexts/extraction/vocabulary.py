"""
Keyword vocabularies for resume section recognition.

All vocabularies are lowercase substrings matched against case-folded, trimmed
lines (segmentation) or the case-folded full text (presence scoring).

Vocabulary classes follow the convention from patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level tuples of keywords
- A single global section vocabulary, reused by every segmenter as its
  "another section started" trigger
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

# =============================================================================
# GLOBAL SECTION VOCABULARY
# =============================================================================

# Any line containing one of these ends the section currently being collected
# (unless it is a header of that same section).
SECTION_KEYWORDS: Tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "work",
    "project",
    "objective",
    "summary",
    "employment",
    "qualification",
    "achievements",
)


# =============================================================================
# SECTION HEADER VOCABULARIES (segmentation)
# =============================================================================


@dataclass(frozen=True)
class SectionHeaderKeywords:
    """
    Keywords that open a section of a given type.

    Any line containing one of these is treated as belonging to the section,
    so the lists also catch content lines ("B.Tech, IIT Ropar") and not only
    header lines ("EDUCATION").
    """

    EDUCATION: tuple = (
        "education",
        "academic",
        "qualification",
        "degree",
        "university",
        "college",
        "school",
        "institute",
        "certification",
        "diploma",
        "bachelor",
        "master",
        "phd",
        "b.tech",
        "m.tech",
        "b.e",
        "m.e",
        "b.sc",
        "m.sc",
        "bca",
        "mca",
        "b.com",
        "m.com",
        "b.cs-it",
        "imca",
        "bba",
        "mba",
        "honors",
        "scholarship",
    )

    EXPERIENCE: tuple = (
        "experience",
        "employment",
        "work history",
        "professional experience",
        "work experience",
        "career history",
        "professional background",
        "employment history",
        "job history",
        "positions held",
        "job title",
        "job responsibilities",
        "job description",
        "job summary",
    )

    PROJECTS: tuple = (
        "projects",
        "personal projects",
        "academic projects",
        "key projects",
        "major projects",
        "professional projects",
        "project experience",
        "relevant projects",
        "featured projects",
        "latest projects",
        "top projects",
    )

    SKILLS: tuple = (
        "skills",
        "technologies",
        "technical proficiency",
        "core competencies",
        "tech stack",
    )


# =============================================================================
# SECTION PRESENCE VOCABULARIES (scoring)
# =============================================================================


@dataclass(frozen=True)
class PresenceKeywords:
    """
    Keywords whose presence anywhere in the text evidences a resume area.

    Each category contributes at most 25 points to the section score.
    """

    CONTACT: tuple = ("email", "phone", "address", "linkedin")
    EDUCATION: tuple = ("education", "university", "college", "degree", "academic")
    EXPERIENCE: tuple = ("experience", "internship", "work", "position of responsibility")
    SKILLS: tuple = ("skills", "technologies", "tools", "expertise")


PRESENCE_CATEGORIES: Mapping[str, tuple] = MappingProxyType(
    {
        "contact": PresenceKeywords.CONTACT,
        "education": PresenceKeywords.EDUCATION,
        "experience": PresenceKeywords.EXPERIENCE,
        "skills": PresenceKeywords.SKILLS,
    }
)


# =============================================================================
# ENTRY QUALITY VOCABULARIES (suggestions)
# =============================================================================

ACTION_VERBS: Tuple[str, ...] = (
    "developed",
    "managed",
    "created",
    "implemented",
    "designed",
    "led",
    "improved",
)

# Regex alternatives, not plain substrings
DEGREE_MARKERS: Tuple[str, ...] = ("bachelor", "master", "phd", r"b\.", r"m\.", "diploma")

GRADE_MARKERS: Tuple[str, ...] = ("gpa", "cgpa", "grade", "percentage")
