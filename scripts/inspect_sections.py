#!/usr/bin/env python3
"""
Inspect how a resume is segmented before scoring it.

Usage:
    python scripts/inspect_sections.py resume.txt
    python scripts/inspect_sections.py resume.txt --full
"""

from pathlib import Path

import typer
from dotenv import load_dotenv

from scout.contexts.extraction import (
    extract_education,
    extract_experience,
    extract_personal_info,
    extract_projects,
    extract_skills,
)
from scout.contexts.scoring.formatting import check_formatting
from scout.contexts.scoring.section_presence import score_section_breakdown
from scout.utils.logger import setup_console_logger
from scout.utils.text_processing import truncate_display

load_dotenv()

app = typer.Typer(help="Inspect resume segmentation.")


@app.command()
def main(
    resume: Path = typer.Argument(..., help="Plain-text resume file", exists=True, dir_okay=False),
    full: bool = typer.Option(False, "--full", help="Show full entries instead of truncating"),
):
    """Display extracted personal info, section entries and structure checks."""
    setup_console_logger("WARNING")
    try:
        text = resume.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        typer.echo(f"ERROR: Resume is not valid UTF-8: {resume} ({e.reason})", err=True)
        raise typer.Exit(code=1)

    info = extract_personal_info(text)
    typer.echo("=== Personal Info ===")
    for key, value in info.to_dict().items():
        typer.echo(f"  {key}: {value or '(not found)'}")

    extractors = {
        "Education": extract_education,
        "Experience": extract_experience,
        "Projects": extract_projects,
        "Skills": extract_skills,
    }
    for title, extract in extractors.items():
        entries = extract(text)
        typer.echo(f"\n=== {title} ({len(entries)}) ===")
        if not entries:
            typer.echo("  (none detected)")
        for i, entry in enumerate(entries, 1):
            typer.echo(f"  {i}. {entry if full else truncate_display(entry, 90)}")

    typer.echo("\n=== Section Presence ===")
    for category, points in score_section_breakdown(text).items():
        typer.echo(f"  {category}: {points}/25")

    formatting = check_formatting(text)
    typer.echo(f"\n=== Formatting ({formatting.score}/100) ===")
    if formatting.is_clean:
        typer.echo("  No issues found")
    for deduction in formatting.deductions:
        typer.echo(f"  - {deduction}")


if __name__ == "__main__":
    app()
