"""
Extraction Context

Responsibilities:
- Extracts the candidate's name and contact fields from raw resume text
- Segments the text into education, experience, project and skills entries
- Owns the keyword vocabularies and regex patterns used to recognize them

Owns: Resume structure recognition
Never: Assigns scores or writes suggestions
"""

from scout.contexts.extraction.personal_info import PersonalInfo, extract_personal_info
from scout.contexts.extraction.section_segmenter import (
    SectionSegmenter,
    extract_education,
    extract_experience,
    extract_projects,
    extract_skills,
)

__all__ = [
    "PersonalInfo",
    "extract_personal_info",
    "SectionSegmenter",
    "extract_education",
    "extract_experience",
    "extract_projects",
    "extract_skills",
]
