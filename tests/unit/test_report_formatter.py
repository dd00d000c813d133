"""Unit tests for plain-text report formatting."""

import pytest

from scout.utils.report_formatter import Column, TableFormatter, score_bar


@pytest.mark.unit
def test_table_layout():
    report = TableFormatter([Column("Area", 6), Column("Score", 5, ">")], total_width=12)
    report.add_section_header("Title").add_table_header().add_row(["skills", 75])

    assert report.render().splitlines() == [
        "=" * 12,
        "Title",
        "=" * 12,
        "Area   Score",
        "-" * 12,
        "skills    75",
    ]


@pytest.mark.unit
def test_add_row_rejects_wrong_width():
    report = TableFormatter([Column("Area", 6)])

    with pytest.raises(ValueError):
        report.add_row(["skills", 75])


@pytest.mark.unit
@pytest.mark.parametrize(
    "score, expected",
    [(0, "........"), (75, "######.."), (100, "########"), (-20, "........"), (130, "########")],
)
def test_score_bar(score, expected):
    assert score_bar(score, width=8) == expected
