"""Shared fixtures for unit and integration tests."""

from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_resume_path() -> Path:
    return FIXTURES_PATH / "sample_resume.txt"


@pytest.fixture
def sample_resume_text(sample_resume_path) -> str:
    return sample_resume_path.read_text(encoding="utf-8")
