"""
Suggestion generation for the Scoring context.

Each builder looks at already-computed extraction/scoring results for one area
and returns a SuggestionGroup: the advice for that area plus its sub-score.
Contact, experience and education lose config.suggestion_penalty points per
suggestion; skills and format reuse their own scores.
"""

from typing import Sequence

from scout.contexts.extraction.patterns import EntryPatterns
from scout.contexts.extraction.personal_info import PersonalInfo
from scout.contexts.scoring.analysis_data_structures import (
    FormattingCheckResult,
    KeywordMatchResult,
    ScoreAreas,
    SuggestionGroup,
)
from scout.contexts.scoring.config import DEFAULT_SCORING_CONFIG, ScoringConfig
from scout.utils.text_processing import round_half_up, to_lower

WELL_OPTIMIZED = "Your resume is well-optimized for ATS systems"


class Suggestions:
    """Suggestion texts, grouped by area."""

    # Contact
    ADD_EMAIL = "Add your email address"
    ADD_PHONE = "Add your phone number"
    ADD_LINKEDIN = "Add your LinkedIn profile URL"

    # Skills (header line, followed by one line per missing skill)
    MISSING_SKILLS_HEADER = "Missing skills are:"

    # Experience
    ADD_EXPERIENCE = "Add your work experience section"
    EXPERIENCE_DATES = "Include dates for each work experience"
    EXPERIENCE_BULLETS = "Use bullet points to list your achievements and responsibilities"
    EXPERIENCE_ACTION_VERBS = "Start bullet points with strong action verbs"

    # Education
    ADD_EDUCATION = "Add your educational background"
    EDUCATION_DATES = "Include graduation dates"
    EDUCATION_DEGREE = "Specify your degree type"
    EDUCATION_GPA = "Include your CGPA if it's above 7.0"


def penalized_score(num_suggestions: int, config: ScoringConfig) -> int:
    """
    Sub-score for an area that loses points per suggestion.

    Unclamped unless config.clamp_subscores is set: with a large penalty the
    score may go negative.
    """
    score = 100 - config.suggestion_penalty * num_suggestions
    if config.clamp_subscores:
        score = max(0, min(100, score))
    return score


def contact_suggestions(
    info: PersonalInfo, config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> SuggestionGroup:
    """One suggestion per missing e-mail, phone or LinkedIn field."""
    suggestions = []
    if not info.email:
        suggestions.append(Suggestions.ADD_EMAIL)
    if not info.phone:
        suggestions.append(Suggestions.ADD_PHONE)
    if not info.linkedin:
        suggestions.append(Suggestions.ADD_LINKEDIN)

    return SuggestionGroup(
        area=ScoreAreas.CONTACT,
        suggestions=tuple(suggestions),
        score=penalized_score(len(suggestions), config),
    )


def skills_suggestions(keyword_match: KeywordMatchResult) -> SuggestionGroup:
    """A header line followed by each missing skill, in required order."""
    suggestions = []
    if keyword_match.missing_skills:
        suggestions.append(Suggestions.MISSING_SKILLS_HEADER)
        suggestions.extend(keyword_match.missing_skills)

    return SuggestionGroup(
        area=ScoreAreas.SKILLS,
        suggestions=tuple(suggestions),
        score=round_half_up(keyword_match.score),
    )


def experience_suggestions(
    entries: Sequence[str], config: ScoringConfig = DEFAULT_SCORING_CONFIG
) -> SuggestionGroup:
    """
    Check experience entries for dates, bullets and action verbs.

    Each check passes if at least one entry satisfies it.
    """
    if not entries:
        suggestions = [Suggestions.ADD_EXPERIENCE]
    else:
        suggestions = []
        if not any(EntryPatterns.YEAR.search(entry) for entry in entries):
            suggestions.append(Suggestions.EXPERIENCE_DATES)
        if not any(EntryPatterns.BULLET.search(entry) for entry in entries):
            suggestions.append(Suggestions.EXPERIENCE_BULLETS)
        if not any(EntryPatterns.ACTION_VERB.search(to_lower(entry)) for entry in entries):
            suggestions.append(Suggestions.EXPERIENCE_ACTION_VERBS)

    return SuggestionGroup(
        area=ScoreAreas.EXPERIENCE,
        suggestions=tuple(suggestions),
        score=penalized_score(len(suggestions), config),
    )


def education_suggestions(
    entries: Sequence[str],
    require_gpa: bool = False,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> SuggestionGroup:
    """
    Check education entries for graduation dates, a degree and (optionally) a grade.

    Args:
        entries: Education entries
        require_gpa: Also require a GPA/CGPA/grade/percentage mention
        config: Scoring configuration

    Returns:
        SuggestionGroup for the education area
    """
    if not entries:
        suggestions = [Suggestions.ADD_EDUCATION]
    else:
        lowered = [to_lower(entry) for entry in entries]
        suggestions = []
        if not any(EntryPatterns.YEAR.search(entry) for entry in entries):
            suggestions.append(Suggestions.EDUCATION_DATES)
        if not any(EntryPatterns.DEGREE.search(entry) for entry in lowered):
            suggestions.append(Suggestions.EDUCATION_DEGREE)
        if require_gpa and not any(EntryPatterns.GRADE.search(entry) for entry in lowered):
            suggestions.append(Suggestions.EDUCATION_GPA)

    return SuggestionGroup(
        area=ScoreAreas.EDUCATION,
        suggestions=tuple(suggestions),
        score=penalized_score(len(suggestions), config),
    )


def format_suggestions(formatting: FormattingCheckResult) -> SuggestionGroup:
    """Formatting deductions, verbatim, when the formatting score is below 100."""
    suggestions = formatting.deductions if formatting.score < 100 else ()
    return SuggestionGroup(
        area=ScoreAreas.FORMAT, suggestions=tuple(suggestions), score=formatting.score
    )
