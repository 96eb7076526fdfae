"""
Follow-up controller.

Single entry point for "give me the next question or tell me to submit",
shared by the owner (authenticated) and public (share-token) surfaces. The
surface only decides how the form was resolved; transition rules and
generator behaviour are identical for both.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from agents.followup.question_generator import QuestionGenerator
from agents.followup.state import (
    ConversationError,
    ConversationState,
    FollowupRequest,
    QAPair,
)
from models.form import Form

logger = logging.getLogger(__name__)

AI_DISABLED = "AI follow-ups disabled for this form."


class FollowupRejected(Exception):
    """A request_next precondition failed; carries an HTTP-style status."""

    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


@dataclass
class AccessContext:
    """
    A form resolved for a caller, plus what that caller may do with it.

    ``allow_overrides`` lets the owner preview a draft role summary or base
    question list in the prompt; the stored form still decides the cap and
    how many history entries are base answers.
    """
    form: Form
    surface: str  # "owner" | "public"
    allow_overrides: bool = False

    @classmethod
    def owner(cls, form: Form) -> "AccessContext":
        return cls(form=form, surface="owner", allow_overrides=True)

    @classmethod
    def public(cls, form: Form) -> "AccessContext":
        return cls(form=form, surface="public", allow_overrides=False)


@dataclass
class FollowupOutcome:
    """Either the next question or the submit signal."""
    question: Optional[str]
    done: bool
    used: int
    remaining: int


class FollowupController:
    """Runs one request_next transition over a replayed conversation."""

    def __init__(self, generator: QuestionGenerator):
        self.generator = generator

    @staticmethod
    def replay(access: AccessContext, history: Optional[List[QAPair]]) -> ConversationState:
        form = access.form
        try:
            return ConversationState.replay(
                history or [],
                base_question_count=len(form.base_questions or []),
                max_ai_questions=form.max_ai_questions,
            )
        except ConversationError as e:
            raise FollowupRejected(str(e), status=400) from e

    def request_next(
        self,
        access: AccessContext,
        history: Optional[List[QAPair]],
        resume_profile: Optional[Dict[str, Any]],
        role_summary: Optional[str] = None,
        base_questions: Optional[List[str]] = None,
    ) -> FollowupOutcome:
        """
        Return the next follow-up question, or the submit signal once the
        form's cap is reached.

        Raises:
            FollowupRejected: AI disabled, more follow-ups than the
                cap, or missing resume (status 400)
            GenerationError: The model call failed
        """
        form = access.form
        if not form.ai_enabled:
            raise FollowupRejected(AI_DISABLED, status=400)

        state = self.replay(access, history)

        if state.is_exhausted:
            return FollowupOutcome(question=None, done=True, used=state.used, remaining=0)

        if not access.allow_overrides:
            role_summary, base_questions = None, None

        request = FollowupRequest(
            mode=access.surface,
            role_summary=role_summary if role_summary is not None else form.summary,
            base_questions=base_questions if base_questions is not None else list(form.base_questions or []),
            history=state.history(),
            resume_profile=resume_profile,
        )

        result = self.generator.generate_followup(request)
        if not result.ok:
            raise FollowupRejected(result.error or "AI failed", status=result.status)

        state.ask(result.question)
        logger.info(
            "Follow-up %d/%d generated for form %s (%s)",
            state.used + 1, form.max_ai_questions, form.id, access.surface,
        )

        return FollowupOutcome(
            question=result.question,
            done=False,
            used=state.used,
            remaining=state.remaining,
        )

    def validate_submission(self, access: AccessContext, answers: List[QAPair]) -> ConversationState:
        """
        Check a final answer list against the form's follow-up rules.

        Raises:
            FollowupRejected: More follow-up answers than the cap allows, or
                follow-ups out of order
        """
        form = access.form
        state = self.replay(access, answers)
        if state.used and not form.ai_enabled:
            raise FollowupRejected(AI_DISABLED, status=400)
        return state
