"""
Agents module containing the follow-up, summarization and resume agents.
"""

from .followup.controller import FollowupController
from .followup.question_generator import QuestionGenerator
from .summarization.candidate_summary import CandidateSummaryGenerator
from .resume.profile_extractor import ResumeProfileExtractor

__all__ = [
    "FollowupController",
    "QuestionGenerator",
    "CandidateSummaryGenerator",
    "ResumeProfileExtractor",
]
