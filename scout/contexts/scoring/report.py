"""
Human-readable rendering of a ResumeAnalysisResult.
"""

from scout.contexts.scoring.analysis_data_structures import ResumeAnalysisResult
from scout.utils.report_formatter import Column, TableFormatter, score_bar


def render_analysis_report(result: ResumeAnalysisResult) -> str:
    """
    Render the headline score, contact details, sub-scores and suggestions.

    Args:
        result: Analysis to render

    Returns:
        Multi-line report string
    """
    info = result.personal_info
    report = TableFormatter(
        columns=[Column("Area", 12), Column("Score", 6, ">"), Column("", 22)],
    )

    report.add_section_header(f"ATS Score: {result.ats_score}")
    report.add_text(f"Name: {info.name}")
    report.add_text(f"Email: {info.email}")
    report.add_text(f"Phone: {info.phone}")
    report.add_text(f"LinkedIn: {info.linkedin}")
    report.add_text()

    report.add_table_header()
    for area, score in result.section_scores.items():
        report.add_row([area, score, score_bar(score)])
    report.add_text()
    report.add_text(f"Section presence: {result.section_score}/100")
    report.add_text(
        f"Skills matched: {len(result.keyword_match.found_skills)}"
        f"/{len(result.keyword_match.found_skills) + len(result.keyword_match.missing_skills)}"
    )
    report.add_text()

    report.add_text("Suggestions:")
    for suggestion in result.suggestions:
        report.add_text(f"- {suggestion}")

    return report.render()
