"""
Form repository.

Lookups by owner (authenticated surface) and by share token (public surface).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from models.form import Form
from repositories.base_repository import BaseRepository


class FormRepository(BaseRepository[Form]):
    """Repository for managing hiring forms."""

    def __init__(self, db_session: Session):
        super().__init__(db_session, Form)

    def get_by_share_token(self, share_token: str) -> Optional[Form]:
        statement = select(Form).where(Form.share_token == share_token)
        return self.db.exec(statement).first()

    def list_by_owner(self, owner_id: str, archived: bool = False) -> List[Form]:
        """
        List an owner's forms, newest first.

        Args:
            owner_id: Identity-provider user id
            archived: When False (default listing) archived forms are hidden;
                when True only archived forms are returned
        """
        statement = (
            select(Form)
            .where(Form.owner_id == owner_id)
            .where(Form.archived == archived)
            .order_by(Form.created_at.desc(), Form.id.desc())
        )
        return list(self.db.exec(statement).all())

    def apply_update(self, form: Form, changes: Dict[str, Any]) -> Form:
        """Apply a partial update; only the supplied keys change."""
        for key, value in changes.items():
            setattr(form, key, value)
        form.updated_at = datetime.utcnow()
        return self.save(form)
