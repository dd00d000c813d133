"""
Required-skill matching for the Scoring context.

Matching is plain case-insensitive substring containment: no tokenization, no
stemming, no word boundaries. A short skill such as "Go" therefore also matches
inside "Google". That is a known limitation of the heuristic.
"""

from typing import List, Sequence

from scout.contexts.scoring.analysis_data_structures import KeywordMatchResult
from scout.contexts.scoring.logger import log_keyword_match
from scout.utils.text_processing import split, to_lower


def skill_in_text(skill: str, lowered_text: str) -> bool:
    """
    Check whether a skill occurs in already case-folded text.

    Tries the whole text first, then each period-separated segment.

    Args:
        skill: Required skill (any case)
        lowered_text: Case-folded resume text

    Returns:
        True if the case-folded skill is a substring of the text or a segment
    """
    lowered_skill = to_lower(skill)
    if lowered_skill in lowered_text:
        return True
    return any(lowered_skill in sentence for sentence in split(lowered_text, "."))


def match_keywords(text: str, required_skills: Sequence[str]) -> KeywordMatchResult:
    """
    Score how many required skills a resume mentions.

    Args:
        text: Raw resume text
        required_skills: Skills the job requires, in priority order

    Returns:
        KeywordMatchResult with score = 100 * found / required
        (0 when no skills are required)

    Example:
        >>> result = match_keywords("Built services in Go and Python.", ["python", "SQL"])
        >>> result.score, result.found_skills, result.missing_skills
        (50.0, ('python',), ('SQL',))
    """
    lowered_text = to_lower(text)
    found: List[str] = []
    missing: List[str] = []

    for skill in required_skills:
        if skill_in_text(skill, lowered_text):
            found.append(skill)
        else:
            missing.append(skill)

    score = 100 * len(found) / len(required_skills) if required_skills else 0.0

    log_keyword_match(score, found, missing)
    return KeywordMatchResult(
        score=score, found_skills=tuple(found), missing_skills=tuple(missing)
    )
