"""
Generic loguru setup shared by all contexts.

Context-specific wrappers (prefixed messages, high-level helpers) live in
contexts/{context}/logger.py and should be imported from there.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for one analysis session.

    Replaces any existing sinks with a DEBUG file sink in log_dir and a
    colorized console sink on stderr, then logs a provenance header. The console
    sink goes to stderr so that machine-readable output on stdout stays clean.

    Args:
        context_name: Session identifier, used as the log file stem (e.g., "analyze")
        log_dir: Directory for this session's log file (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level shown on the console

    Returns:
        Path to the log file

    Example:
        from scout.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="analyze",
            log_dir=Path("outs/logs/analyze_20261019_101500"),
            extra_provenance={"Resume": "jane_doe.txt"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def setup_console_logger(level: str = "WARNING") -> None:
    """
    Log to stderr only, at the given minimum level.

    Used when no log directory is requested, to keep loguru's default DEBUG
    sink from flooding the console.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance (script, command, working directory, Python version).

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
