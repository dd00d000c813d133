"""
Shared utilities for SCOUT.

Common functionality used across contexts:
- Text normalization
- Logger setup
- Report formatting
"""

from scout.utils.text_processing import round_half_up, split, split_lines, to_lower, trim

__all__ = ["round_half_up", "split", "split_lines", "to_lower", "trim"]
