"""
Scoring Context

Responsibilities:
- Matches required skills against the resume text
- Scores section presence and formatting quality
- Derives per-area sub-scores and actionable suggestions
- Aggregates the weighted ATS score

Owns: Scoring rules, weights, suggestion texts, result records
Never: Reads files or prints results
"""

from scout.contexts.scoring.analysis_data_structures import (
    FormattingCheckResult,
    KeywordMatchResult,
    ResumeAnalysisResult,
)
from scout.contexts.scoring.analyzer import analyze_resume
from scout.contexts.scoring.config import ScoringConfig, load_scoring_config
from scout.contexts.scoring.exceptions import ScoringConfigError

__all__ = [
    # Orchestrator
    "analyze_resume",
    # Result records
    "ResumeAnalysisResult",
    "KeywordMatchResult",
    "FormattingCheckResult",
    # Configuration
    "ScoringConfig",
    "load_scoring_config",
    "ScoringConfigError",
]
