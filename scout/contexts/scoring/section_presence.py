"""
Section-presence scoring for the Scoring context.

Four areas (contact, education, experience, skills) contribute up to 25 points
each, in proportion to how many of their keywords appear in the text.
"""

from typing import Dict, Mapping, Sequence

from scout.contexts.extraction.vocabulary import PRESENCE_CATEGORIES
from scout.utils.text_processing import round_half_up, to_lower

MAX_CATEGORY_POINTS = 25


def category_points(lowered_text: str, keywords: Sequence[str]) -> int:
    """
    Points earned by one category.

    Args:
        lowered_text: Case-folded resume text
        keywords: The category's keywords

    Returns:
        min(25, round(25 * found / total)), or 0 for an empty keyword list
    """
    if not keywords:
        return 0
    found = sum(1 for keyword in keywords if keyword in lowered_text)
    return min(MAX_CATEGORY_POINTS, round_half_up(MAX_CATEGORY_POINTS * found / len(keywords)))


def score_section_breakdown(
    text: str, categories: Mapping[str, Sequence[str]] = PRESENCE_CATEGORIES
) -> Dict[str, int]:
    """Points per category, keyed by category name."""
    lowered_text = to_lower(text)
    return {name: category_points(lowered_text, keywords) for name, keywords in categories.items()}


def score_section_presence(text: str) -> int:
    """
    Score the presence of essential resume areas.

    Args:
        text: Raw resume text

    Returns:
        Sum of the four category contributions (0-100)
    """
    return sum(score_section_breakdown(text).values())
