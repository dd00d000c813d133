"""
Section segmentation for the Extraction context.

A SectionSegmenter scans a resume line by line and collects the entries of one
section type (education, experience, projects, skills). All section types share
the same state machine and differ only in their header vocabulary; the global
section vocabulary acts as the "another section started" trigger for all of them.

Every segmenter runs independently over the full text, so a line that closes
one section is still seen (and possibly collected) by the segmenter of the
section it opens.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from scout.contexts.extraction.logger import log_segmentation_result
from scout.contexts.extraction.vocabulary import SECTION_KEYWORDS, SectionHeaderKeywords
from scout.utils.text_processing import split_lines, to_lower, trim


class SegmenterState(Enum):
    """Whether the scanner is currently inside a section of its type."""

    OUTSIDE = "outside"
    INSIDE = "inside"


def _contains_any(haystack: str, needles: Iterable[str]) -> bool:
    return any(needle in haystack for needle in needles)


@dataclass(frozen=True)
class SectionSegmenter:
    """
    Collects the entries of one section type from resume text.

    An entry is the space-joined run of trimmed, non-blank lines from a header
    (or the start of a new block) up to a blank line, a line of another section,
    or the end of the document.

    Transitions per line (matched case-folded and trimmed):
    1. Header keyword found: collect the line, enter INSIDE
    2. INSIDE and foreign keyword found: flush entry, go OUTSIDE (line dropped)
    3. INSIDE and non-blank: collect the line
    4. INSIDE and blank: flush entry, stay INSIDE
    5. OUTSIDE otherwise: ignore

    Attributes:
        section_type: Name used in logs (e.g., "education")
        header_keywords: Substrings that mark a line as part of this section
        foreign_keywords: Substrings that mark the start of any other section
    """

    section_type: str
    header_keywords: Tuple[str, ...]
    foreign_keywords: Tuple[str, ...] = SECTION_KEYWORDS

    def is_header(self, lowered_line: str) -> bool:
        return _contains_any(lowered_line, self.header_keywords)

    def is_foreign(self, lowered_line: str) -> bool:
        return _contains_any(lowered_line, self.foreign_keywords)

    def segment_lines(self, lines: Sequence[str]) -> List[str]:
        """
        Run the state machine over already-split lines.

        Args:
            lines: Document lines in order

        Returns:
            Entries in document order (never empty strings)
        """
        entries: List[str] = []
        pending: List[str] = []
        state = SegmenterState.OUTSIDE

        def flush() -> None:
            if pending:
                entries.append(" ".join(pending))
                pending.clear()

        for line in lines:
            trimmed = trim(line)
            lowered = to_lower(trimmed)

            if self.is_header(lowered):
                pending.append(trimmed)
                state = SegmenterState.INSIDE
            elif state is SegmenterState.OUTSIDE:
                continue
            elif self.is_foreign(lowered):
                flush()
                state = SegmenterState.OUTSIDE
            elif trimmed:
                pending.append(trimmed)
            else:
                flush()

        flush()
        return entries

    def segment(self, text: str) -> List[str]:
        """
        Extract this section type's entries from raw resume text.

        Args:
            text: Raw resume text

        Returns:
            Entries in document order

        Example:
            >>> PROJECTS_SEGMENTER.segment("PROJECTS\\n- Built a cache\\n\\nSKILLS\\nGo")
            ['PROJECTS - Built a cache']
        """
        entries = self.segment_lines(split_lines(text))
        log_segmentation_result(self.section_type, entries)
        return entries


# =============================================================================
# SEGMENTERS PER SECTION TYPE
# =============================================================================

EDUCATION_SEGMENTER = SectionSegmenter("education", SectionHeaderKeywords.EDUCATION)
EXPERIENCE_SEGMENTER = SectionSegmenter("experience", SectionHeaderKeywords.EXPERIENCE)
PROJECTS_SEGMENTER = SectionSegmenter("projects", SectionHeaderKeywords.PROJECTS)
SKILLS_SEGMENTER = SectionSegmenter("skills", SectionHeaderKeywords.SKILLS)


def extract_education(text: str) -> List[str]:
    """Extract education entries (degrees, institutions, certifications)."""
    return EDUCATION_SEGMENTER.segment(text)


def extract_experience(text: str) -> List[str]:
    """Extract work experience entries."""
    return EXPERIENCE_SEGMENTER.segment(text)


def extract_projects(text: str) -> List[str]:
    """Extract project entries."""
    return PROJECTS_SEGMENTER.segment(text)


def extract_skills(text: str) -> List[str]:
    """Extract skills-section entries."""
    return SKILLS_SEGMENTER.segment(text)
