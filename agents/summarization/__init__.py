"""
Summarization module public interface.
"""

from .candidate_summary import CandidateSummaryGenerator, SummaryResult, generate_summary

__all__ = [
    "CandidateSummaryGenerator",
    "SummaryResult",
    "generate_summary",
]
