#!/usr/bin/env python3
"""
Resume ATS Analysis CLI

Scores a plain-text resume against a job's required skills and prints the ATS
score, contact details, sub-scores and suggestions.

Usage:
    # Text report
    python scripts/analyze_resume.py resume.txt -s C++ -s Python -s SQL -s Java

    # Skills from a file (one per line, '#' comments allowed), GPA required
    python scripts/analyze_resume.py resume.txt --skills-file skills.txt --require-gpa

    # Full structured record
    python scripts/analyze_resume.py resume.txt -s Python --format json

    # Read the resume from stdin
    cat resume.txt | python scripts/analyze_resume.py - -s Python
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from dotenv import load_dotenv
from typing_extensions import Annotated

from scout.contexts.scoring import ScoringConfigError, analyze_resume, load_scoring_config
from scout.contexts.scoring.report import render_analysis_report
from scout.utils.logger import setup_console_logger, setup_logger

load_dotenv()

OUTPUT_FORMATS = ("text", "json", "yaml")

app = typer.Typer(
    help="Score a plain-text resume against a job's required skills",
    add_completion=False,
)


def read_resume_text(resume: Path) -> str:
    """Read resume text from a file, or from stdin when the path is '-'."""
    if str(resume) == "-":
        return sys.stdin.read()
    return resume.read_text(encoding="utf-8")


def read_skills_file(skills_file: Path) -> List[str]:
    """
    Read required skills, one per line.

    Blank lines and lines starting with '#' are skipped.
    """
    skills = []
    for line in skills_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            skills.append(line)
    return skills


@app.command()
def main(
    resume: Annotated[
        Path,
        typer.Argument(help="Plain-text resume file, or '-' to read stdin", dir_okay=False),
    ],
    skill: Annotated[
        Optional[List[str]],
        typer.Option("--skill", "-s", help="Required skill (repeatable)"),
    ] = None,
    skills_file: Annotated[
        Optional[Path],
        typer.Option(
            "--skills-file",
            help="File with one required skill per line",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    require_gpa: Annotated[
        bool,
        typer.Option("--require-gpa", help="Suggest adding a GPA/CGPA when missing"),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json or yaml"),
    ] = "text",
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            help="Scoring config override (YAML). Defaults to $SCOUT_SCORING_CONFIG",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a DEBUG log of this run under this directory"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show analysis progress on stderr"),
    ] = False,
):
    """
    Analyze a resume and print the results.

    Skills given with --skill come first, followed by those from --skills-file.
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"ERROR: Unknown format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    if str(resume) != "-" and not resume.is_file():
        typer.echo(f"ERROR: Resume not found: {resume}", err=True)
        raise typer.Exit(code=1)

    if log_dir is not None:
        session_dir = log_dir / f"analyze_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        log_file = setup_logger(
            context_name="analyze",
            log_dir=session_dir,
            extra_provenance={"Resume": resume},
            console_level="INFO" if verbose else "WARNING",
        )
        typer.echo(f"Log file: {log_file}", err=True)
    else:
        setup_console_logger("INFO" if verbose else "WARNING")

    required_skills = list(skill or [])
    if skills_file is not None:
        try:
            required_skills.extend(read_skills_file(skills_file))
        except UnicodeDecodeError as e:
            typer.echo(f"ERROR: Skills file is not valid UTF-8: {skills_file} ({e.reason})", err=True)
            raise typer.Exit(code=1)

    try:
        scoring_config = load_scoring_config(config)
    except ScoringConfigError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        text = read_resume_text(resume)
    except UnicodeDecodeError as e:
        typer.echo(f"ERROR: Resume is not valid UTF-8: {resume} ({e.reason})", err=True)
        raise typer.Exit(code=1)

    result = analyze_resume(text, required_skills, require_gpa=require_gpa, config=scoring_config)

    if output_format == "json":
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif output_format == "yaml":
        typer.echo(yaml.safe_dump(result.to_dict(), sort_keys=False, allow_unicode=True))
    else:
        typer.echo(render_analysis_report(result))


if __name__ == "__main__":
    app()
