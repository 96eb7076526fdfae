"""
Adaptive follow-up questions.

Public surface:
- is_too_generic: quality gate for generated questions
- build_covered_topics: already-discussed tokens from history
- QuestionGenerator: prompt -> model -> clean -> fallback
- FollowupController / AccessContext: bounded request_next loop
"""

from .quality_gate import is_too_generic
from .topics import build_covered_topics
from .state import ConversationState, ConversationError, FollowupRequest, FollowupResult, FollowupStatus
from .question_generator import QuestionGenerator, fallback_question
from .controller import AccessContext, FollowupController, FollowupOutcome, FollowupRejected

__all__ = [
    "is_too_generic",
    "build_covered_topics",
    "ConversationState",
    "ConversationError",
    "FollowupRequest",
    "FollowupResult",
    "FollowupStatus",
    "QuestionGenerator",
    "fallback_question",
    "AccessContext",
    "FollowupController",
    "FollowupOutcome",
    "FollowupRejected",
]
