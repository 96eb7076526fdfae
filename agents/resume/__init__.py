"""
Resume profile extraction.
"""

from .profile_extractor import ResumeParseError, ResumeProfileExtractor, RESUME_PROFILE_SCHEMA

__all__ = ["ResumeParseError", "ResumeProfileExtractor", "RESUME_PROFILE_SCHEMA"]
