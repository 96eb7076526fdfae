"""
Form Service - owner form management and access resolution.

Both HTTP surfaces resolve a form here before anything else happens:
- owner surface: form id + authenticated owner id (404 / 403)
- public surface: share token + public flag (404 / 403)
The result is an AccessContext handed to the follow-up controller and the
response service.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlmodel import Session

from agents.followup.controller import AccessContext
from models.form import Form, MAX_AI_QUESTIONS_LIMIT, DEFAULT_MAX_AI_QUESTIONS
from models.response import FormResponse
from repositories import FormRepository, ResponseRepository
from services.exceptions import BadRequestError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

FORM_NOT_FOUND = "Form not found"
FORBIDDEN = "Forbidden"
FORM_NOT_PUBLIC = "Form is not public"
NO_VALID_FIELDS = "No valid fields to update"
MAX_AI_RANGE_ERROR = f"maxAiQuestions must be between 0 and {MAX_AI_QUESTIONS_LIMIT}"

UPDATABLE_FIELDS = (
    "name",
    "summary",
    "base_questions",
    "is_public",
    "ai_enabled",
    "max_ai_questions",
    "archived",
)


def validate_max_ai_questions(value: int) -> int:
    if value is None or value < 0 or value > MAX_AI_QUESTIONS_LIMIT:
        raise BadRequestError(MAX_AI_RANGE_ERROR)
    return value


class FormService:
    """Application service for hiring forms."""

    def __init__(self, db_session: Session):
        self.db = db_session
        self.form_repo = FormRepository(db_session)
        self.response_repo = ResponseRepository(db_session)

    # ------------------------------------------------------------------
    # Owner CRUD
    # ------------------------------------------------------------------
    def create_form(
        self,
        owner_id: str,
        name: str = "",
        summary: Optional[str] = None,
        base_questions: Optional[List[str]] = None,
        ai_enabled: bool = False,
        max_ai_questions: Optional[int] = None,
        is_public: bool = False,
    ) -> Form:
        if max_ai_questions is None:
            max_ai_questions = DEFAULT_MAX_AI_QUESTIONS
        validate_max_ai_questions(max_ai_questions)

        form = Form(
            owner_id=owner_id,
            name=name or "",
            summary=summary or "",
            base_questions=list(base_questions or []),
            ai_enabled=bool(ai_enabled),
            max_ai_questions=max_ai_questions,
            is_public=bool(is_public),
        )
        form = self.form_repo.create(form)
        logger.info("Form %s created by %s", form.id, owner_id)
        return form

    def list_forms(self, owner_id: str, archived: bool = False) -> List[Form]:
        return self.form_repo.list_by_owner(owner_id, archived=archived)

    def get_owned_form(self, form_id: int, owner_id: str) -> Form:
        """
        Fetch a form the caller owns.

        Someone else's form is reported as missing so ids can't be probed.
        """
        form = self.form_repo.get_by_id(form_id)
        if not form or form.owner_id != owner_id:
            raise NotFoundError(FORM_NOT_FOUND)
        return form

    def update_form(self, form_id: int, owner_id: str, changes: Dict[str, Any]) -> Form:
        """
        Partial update: only supplied, non-null fields change.

        Raises:
            NotFoundError: Unknown form
            ForbiddenError: Form belongs to another owner
            BadRequestError: Nothing to update, or maxAiQuestions out of range
        """
        form = self.require_owner(form_id, owner_id)

        update = {
            key: value
            for key, value in (changes or {}).items()
            if key in UPDATABLE_FIELDS and value is not None
        }
        if not update:
            raise BadRequestError(NO_VALID_FIELDS)
        if "max_ai_questions" in update:
            validate_max_ai_questions(update["max_ai_questions"])
        if "base_questions" in update:
            update["base_questions"] = list(update["base_questions"])

        form = self.form_repo.apply_update(form, update)
        logger.info("Form %s updated: %s", form.id, sorted(update))
        return form

    def set_archived(self, form_id: int, owner_id: str, archived: bool) -> Form:
        form = self.require_owner(form_id, owner_id)
        return self.form_repo.apply_update(form, {"archived": bool(archived)})

    def get_results(self, form_id: int, owner_id: str) -> Tuple[Form, List[FormResponse]]:
        """Form plus all of its responses, newest first."""
        form = self.require_owner(form_id, owner_id)
        return form, self.response_repo.list_by_form(form.id)

    # ------------------------------------------------------------------
    # Access resolution
    # ------------------------------------------------------------------
    def require_owner(self, form_id: int, owner_id: str) -> Form:
        form = self.form_repo.get_by_id(form_id)
        if not form:
            raise NotFoundError(FORM_NOT_FOUND)
        if form.owner_id != owner_id:
            raise ForbiddenError(FORBIDDEN)
        return form

    def resolve_owner_access(self, form_id: int, owner_id: str) -> AccessContext:
        return AccessContext.owner(self.require_owner(form_id, owner_id))

    def get_public_form(self, share_token: str) -> Form:
        form = self.form_repo.get_by_share_token(share_token)
        if not form:
            raise NotFoundError(FORM_NOT_FOUND)
        if not form.is_public:
            raise ForbiddenError(FORM_NOT_PUBLIC)
        return form

    def resolve_public_access(self, share_token: str) -> AccessContext:
        return AccessContext.public(self.get_public_form(share_token))
