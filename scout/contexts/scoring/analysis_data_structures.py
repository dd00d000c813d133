"""
Result data structures for the Scoring context.

All records are frozen: they are produced once per analysis and never mutated.
Sequences are tuples and mappings are read-only views. to_dict() converts a
record into plain JSON/YAML-serializable containers.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from scout.contexts.extraction.personal_info import PersonalInfo

@dataclass(frozen=True)
class ScoreAreas:
    """Names of the five scored resume areas."""

    CONTACT: str = "contact"
    SKILLS: str = "skills"
    EXPERIENCE: str = "experience"
    EDUCATION: str = "education"
    FORMAT: str = "format"


# Aggregation and reporting order
SUB_SCORE_KEYS = (
    ScoreAreas.CONTACT,
    ScoreAreas.SKILLS,
    ScoreAreas.EXPERIENCE,
    ScoreAreas.EDUCATION,
    ScoreAreas.FORMAT,
)


@dataclass(frozen=True)
class KeywordMatchResult:
    """
    Required-skill coverage of a resume.

    found_skills and missing_skills partition the required skills and keep
    their input order and spelling.

    Attributes:
        score: Percentage of required skills found (0-100)
        found_skills: Required skills present in the text
        missing_skills: Required skills absent from the text
    """

    score: float = 0.0
    found_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "found_skills": list(self.found_skills),
            "missing_skills": list(self.missing_skills),
        }


@dataclass(frozen=True)
class FormattingCheckResult:
    """
    Outcome of the structural formatting checks.

    Attributes:
        score: 100 minus all deductions, floored at 0
        deductions: One message per failed check, in check order
    """

    score: int = 100
    deductions: Tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        """True if no check failed."""
        return not self.deductions

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "deductions": list(self.deductions)}


@dataclass(frozen=True)
class SuggestionGroup:
    """
    Suggestions and derived sub-score for one resume area.

    Attributes:
        area: One of contact, skills, experience, education, format
        suggestions: Human-readable advice, in emission order
        score: Integer sub-score for the area
    """

    area: str
    suggestions: Tuple[str, ...] = ()
    score: int = 100


@dataclass(frozen=True)
class ResumeAnalysisResult:
    """
    Complete analysis of one resume against one list of required skills.

    Attributes:
        personal_info: Name and contact fields
        ats_score: Weighted composite score (0-100 with default weights)
        keyword_match: Required-skill coverage
        section_score: Section-presence score (0-100)
        format_score: Formatting score (0-100)
        education: Education entries
        experience: Work experience entries
        projects: Project entries
        skills: Skills-section entries
        suggestions: Advice in area order (contact, skills, experience,
            education, format), or a single "well-optimized" message
        section_scores: Sub-score per area, keyed by SUB_SCORE_KEYS
        format_deductions: Raw formatting deduction messages
    """

    personal_info: PersonalInfo
    ats_score: int
    keyword_match: KeywordMatchResult
    section_score: int
    format_score: int
    education: Tuple[str, ...] = ()
    experience: Tuple[str, ...] = ()
    projects: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()
    section_scores: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    format_deductions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to plain containers for JSON/YAML output.

        Returns:
            Dict with nested dicts and lists only
        """
        return {
            "personal_info": self.personal_info.to_dict(),
            "ats_score": self.ats_score,
            "keyword_match": self.keyword_match.to_dict(),
            "section_score": self.section_score,
            "format_score": self.format_score,
            "education": list(self.education),
            "experience": list(self.experience),
            "projects": list(self.projects),
            "skills": list(self.skills),
            "suggestions": list(self.suggestions),
            "section_scores": dict(self.section_scores),
            "format_deductions": list(self.format_deductions),
        }
