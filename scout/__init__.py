"""
SCOUT - Screening Compatibility Of Uploaded Text

A rule-based resume analyzer that scores plain-text resumes against a job's
required skills and explains the score the way an Applicant Tracking System would.

Architecture:
- Extraction Context: Personal information and section segmentation
- Scoring Context: Keyword matching, section presence, formatting checks,
  suggestions and the weighted ATS aggregation
"""

__version__ = "0.1.0"
