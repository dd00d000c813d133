"""
Resume analysis orchestration for the Scoring context.

analyze_resume() is the single entry point of the engine. It is a pure
function of its inputs: every component reads the same immutable text, and
the result is a fresh frozen record. Nothing is cached between calls.
"""

from types import MappingProxyType
from typing import Dict, List, Optional, Sequence

from scout.contexts.extraction import (
    extract_education,
    extract_experience,
    extract_personal_info,
    extract_projects,
    extract_skills,
)
from scout.contexts.scoring.analysis_data_structures import (
    SUB_SCORE_KEYS,
    ResumeAnalysisResult,
    SuggestionGroup,
)
from scout.contexts.scoring.config import DEFAULT_SCORING_CONFIG, ScoreWeights, ScoringConfig
from scout.contexts.scoring.formatting import check_formatting
from scout.contexts.scoring.keyword_matcher import match_keywords
from scout.contexts.scoring.logger import log_analysis_result, log_analysis_start
from scout.contexts.scoring.section_presence import score_section_presence
from scout.contexts.scoring.suggestions import (
    WELL_OPTIMIZED,
    contact_suggestions,
    education_suggestions,
    experience_suggestions,
    format_suggestions,
    skills_suggestions,
)
from scout.utils.text_processing import round_half_up


def _validate_inputs(text: str, required_skills: Sequence[str]) -> None:
    if not isinstance(text, str):
        raise ValueError(f"Resume text must be a string, got {type(text).__name__}")
    if isinstance(required_skills, str):
        raise ValueError("required_skills must be a sequence of strings, not a single string")
    for skill in required_skills:
        if not isinstance(skill, str):
            raise ValueError(
                f"required_skills must contain only strings, got {type(skill).__name__}: {skill!r}"
            )


def compute_ats_score(section_scores: Dict[str, int], weights: ScoreWeights) -> int:
    """
    Weighted sum of the five sub-scores.

    Each weighted term is rounded on its own before summing; rounding once at
    the end gives different results for some inputs.

    Args:
        section_scores: Sub-score per area, keyed by SUB_SCORE_KEYS
        weights: Weight per area (ScoreWeights fields are named after the areas)

    Returns:
        Integer ATS score
    """
    return sum(
        round_half_up(section_scores[area] * getattr(weights, area)) for area in SUB_SCORE_KEYS
    )


def collect_suggestions(groups: Sequence[SuggestionGroup]) -> List[str]:
    """Concatenate suggestion groups in order, or return the well-optimized message."""
    suggestions = [suggestion for group in groups for suggestion in group.suggestions]
    return suggestions or [WELL_OPTIMIZED]


def analyze_resume(
    text: str,
    required_skills: Sequence[str],
    require_gpa: bool = False,
    config: Optional[ScoringConfig] = None,
) -> ResumeAnalysisResult:
    """
    Analyze a plain-text resume against a job's required skills.

    Pipeline:
    1. Extract personal info and section entries
    2. Match required skills, score section presence and formatting
    3. Derive per-area suggestions and sub-scores
    4. Aggregate the weighted ATS score

    Args:
        text: Plain-text resume (may be empty)
        required_skills: Skills the job requires, in priority order (may be empty)
        require_gpa: Suggest adding a GPA when education entries lack one
        config: Scoring configuration (defaults reproduce the standard rules)

    Returns:
        ResumeAnalysisResult

    Raises:
        ValueError: If text is not a string, or required_skills is a bare string
            or contains non-string items

    Example:
        result = analyze_resume(Path("jane_doe.txt").read_text(), ["Python", "SQL"])
        print(result.ats_score, result.section_scores["skills"])
    """
    _validate_inputs(text, required_skills)
    config = config or DEFAULT_SCORING_CONFIG
    log_analysis_start(len(text), len(required_skills), require_gpa)

    personal_info = extract_personal_info(text)
    education = extract_education(text)
    experience = extract_experience(text)
    projects = extract_projects(text)
    skills = extract_skills(text)

    keyword_match = match_keywords(text, required_skills)
    section_score = score_section_presence(text)
    formatting = check_formatting(text, config)

    groups = [
        contact_suggestions(personal_info, config),
        skills_suggestions(keyword_match),
        experience_suggestions(experience, config),
        education_suggestions(education, require_gpa, config),
        format_suggestions(formatting),
    ]
    scores_by_area = {group.area: group.score for group in groups}
    section_scores = {area: scores_by_area[area] for area in SUB_SCORE_KEYS}
    ats_score = compute_ats_score(section_scores, config.weights)
    suggestions = collect_suggestions(groups)

    log_analysis_result(ats_score, section_scores, len(suggestions))

    return ResumeAnalysisResult(
        personal_info=personal_info,
        ats_score=ats_score,
        keyword_match=keyword_match,
        section_score=section_score,
        format_score=formatting.score,
        education=tuple(education),
        experience=tuple(experience),
        projects=tuple(projects),
        skills=tuple(skills),
        suggestions=tuple(suggestions),
        section_scores=MappingProxyType(section_scores),
        format_deductions=formatting.deductions,
    )
