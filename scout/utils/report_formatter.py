"""
Plain-text report formatting for analysis results.

Builds aligned tables with a small chained builder so CLI output stays
consistent between commands.
"""

from typing import Any, List


class Column:
    """Column definition: header name, width and alignment ('<', '>' or '^')."""

    def __init__(self, name: str, width: int, align: str = "<"):
        self.name = name
        self.width = width
        self.align = align

    def format(self, value: Any) -> str:
        return f"{value:{self.align}{self.width}}"


class TableFormatter:
    """Builder for text reports made of titled sections and aligned rows."""

    def __init__(self, columns: List[Column], total_width: int = 72):
        """
        Args:
            columns: Column definitions for add_row()
            total_width: Width of separator lines
        """
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add a title framed by '=' separator lines."""
        self.lines.extend(["=" * self.total_width, title, "=" * self.total_width])
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add a row of column names followed by a '-' separator."""
        self.lines.append(" ".join(col.format(col.name) for col in self.columns))
        self.lines.append("-" * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add a data row.

        Raises:
            ValueError: If the number of values doesn't match the columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.lines.append(" ".join(col.format(val) for col, val in zip(self.columns, values)))
        return self

    def add_text(self, text: str = "") -> "TableFormatter":
        """Add a free-form line (blank by default)."""
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def score_bar(score: int, width: int = 20) -> str:
    """
    Render a 0-100 score as a fixed-width bar.

    Scores outside [0, 100] are drawn as empty or full bars.

    Example:
        >>> score_bar(75, width=8)
        '######..'
    """
    filled = max(0, min(width, round(width * score / 100)))
    return "#" * filled + "." * (width - filled)
