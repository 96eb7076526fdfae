from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from models.response import FormResponse
from repositories.base_repository import BaseRepository


class ResponseRepository(BaseRepository[FormResponse]):
    """Repository for candidate responses."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, FormResponse)

    def list_by_form(self, form_id: int) -> List[FormResponse]:
        """All responses for a form, newest first."""
        statement = (
            select(FormResponse)
            .where(FormResponse.form_id == form_id)
            .order_by(FormResponse.created_at.desc(), FormResponse.id.desc())
        )
        return list(self.db.exec(statement).all())

    def update_summary(
        self,
        response: FormResponse,
        summary: Optional[Dict[str, Any]],
        status: str,
        error: Optional[str] = None,
    ) -> FormResponse:
        """Overwrite the summary fields, the only mutable part of a response."""
        response.summary = summary
        response.summary_status = status
        response.summary_error = error
        response.summarized_at = datetime.utcnow()
        return self.save(response)
