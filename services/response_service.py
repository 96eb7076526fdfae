"""
Response Service - candidate submissions and summaries.

A submission is summarized first and written once, summary included. The
summary step never blocks the write: a failed generation stores the
deterministic fallback with summary_status="fallback" and the error recorded.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlmodel import Session

from agents.followup.controller import AccessContext, FollowupController, FollowupRejected
from agents.summarization.candidate_summary import CandidateSummaryGenerator, SummaryResult
from models.form import Form
from models.response import FormResponse, SummaryStatus
from repositories import FormRepository, ResponseRepository
from services.exceptions import BadRequestError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

MISSING_ANSWERS = "Missing answers"
RESUME_REQUIRED = "Resume required"
RESPONSE_NOT_FOUND = "Response not found"


class ResponseService:
    """Application service for candidate responses."""

    def __init__(
        self,
        db_session: Session,
        controller: FollowupController,
        summary_generator: CandidateSummaryGenerator,
    ):
        self.db = db_session
        self.controller = controller
        self.summary_generator = summary_generator

        self.form_repo = FormRepository(db_session)
        self.response_repo = ResponseRepository(db_session)

    def submit(
        self,
        access: AccessContext,
        answers: Optional[List[Dict[str, Any]]],
        resume_profile: Optional[Dict[str, Any]],
    ) -> FormResponse:
        """
        Persist a finished submission, then attach its summary.

        Raises:
            BadRequestError: No answers, no resume, or follow-up answers the
                form does not allow
        """
        if not answers:
            raise BadRequestError(MISSING_ANSWERS)
        if resume_profile is None:
            raise BadRequestError(RESUME_REQUIRED)

        try:
            state = self.controller.validate_submission(access, answers)
        except FollowupRejected as e:
            raise BadRequestError(e.message) from e

        form = access.form
        normalized = [
            {"question": qa.get("question") or "", "answer": qa.get("answer") or ""}
            for qa in answers
        ]
        summary, status, error = self._generate_summary(form, normalized, resume_profile)

        response = self.response_repo.create(
            FormResponse(
                form_id=form.id,
                answers=normalized,
                resume_profile=resume_profile,
                summary=summary,
                summary_status=status,
                summary_error=error,
                summarized_at=datetime.utcnow(),
            )
        )
        logger.info(
            "Response %s saved for form %s (%s, %d follow-ups, summary %s)",
            response.id, form.id, access.surface, state.used, status,
        )
        return response

    def get_response(self, response_id: int, owner_id: str) -> Tuple[FormResponse, Form]:
        """
        Raises:
            NotFoundError: Unknown response or form
            ForbiddenError: The form belongs to another owner
        """
        response = self.response_repo.get_by_id(response_id)
        if not response:
            raise NotFoundError(RESPONSE_NOT_FOUND)

        form = self.form_repo.get_by_id(response.form_id)
        if not form:
            raise NotFoundError("Form not found")
        if form.owner_id != owner_id:
            raise ForbiddenError("Forbidden")
        return response, form

    def regenerate_summary(self, response_id: int, owner_id: str) -> FormResponse:
        """Regenerate and overwrite the summary of an existing response."""
        response, form = self.get_response(response_id, owner_id)
        summary, status, error = self._generate_summary(form, response.answers, response.resume_profile)
        return self.response_repo.update_summary(response, summary=summary, status=status, error=error)

    def _generate_summary(
        self,
        form: Form,
        answers: List[Dict[str, Any]],
        resume_profile: Optional[Dict[str, Any]],
    ) -> Tuple[Dict[str, Any], str, Optional[str]]:
        result: SummaryResult = self.summary_generator.generate(
            form_name=form.name,
            form_summary=form.summary,
            answers=answers,
            resume_profile=resume_profile,
        )
        if result.ok:
            return result.summary, SummaryStatus.GENERATED, None

        logger.warning("Summary for form %s fell back: %s", form.id, result.error)
        return result.summary, SummaryStatus.FALLBACK, result.error
