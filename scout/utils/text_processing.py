"""
Text normalization primitives shared by every context.

All keyword comparisons go through to_lower(); structural checks (regexes,
all-caps headers) run on the raw text and stay case-sensitive.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List

# Characters removed by trim(). Unicode spaces are deliberately not included.
TRIM_CHARS = " \t\r\n"


def to_lower(text: str) -> str:
    """Case-fold text for keyword comparisons."""
    return text.lower()


def trim(text: str) -> str:
    """
    Strip leading/trailing spaces, tabs, carriage returns and newlines.

    Returns:
        Trimmed text, or "" when the input is all whitespace

    Example:
        >>> trim("  Jane Doe\\r\\n")
        'Jane Doe'
    """
    return text.strip(TRIM_CHARS)


def split(text: str, separator: str) -> List[str]:
    """
    Split text on a separator with stream line-reading semantics.

    Empty tokens between consecutive separators are kept, but a single trailing
    separator does not produce a trailing empty token, and empty input produces
    no tokens at all.

    Args:
        text: Text to split
        separator: Delimiter (dropped from the tokens)

    Returns:
        Ordered list of tokens

    Example:
        >>> split("a.b..c.", ".")
        ['a', 'b', '', 'c']
        >>> split("", ".")
        []
    """
    if not text:
        return []

    tokens = text.split(separator)
    if text.endswith(separator):
        tokens.pop()
    return tokens


def split_lines(text: str) -> List[str]:
    """
    Split text into lines.

    Example:
        >>> split_lines("EDUCATION\\nBSc 2018\\n")
        ['EDUCATION', 'BSc 2018']
        >>> split_lines("EDUCATION\\n\\n")
        ['EDUCATION', '']
    """
    return split(text, "\n")


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Python's round() uses banker's rounding (round(12.5) == 12); scores are
    rounded like C's round() instead, on the exact binary value of the float.

    Example:
        >>> round_half_up(12.5)
        13
        >>> round_half_up(2.45)
        2
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("Bachelor of Science in Physics", 12)
        'Bachelor ...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
