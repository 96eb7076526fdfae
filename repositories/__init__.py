"""
Repositories module - Data Access Layer.

Each repository wraps a SQLModel session and handles persistence for one
entity.

Usage:
    from repositories import FormRepository, ResponseRepository

    form_repo = FormRepository(db_session)
    form = form_repo.get_by_share_token(token)
    responses = ResponseRepository(db_session).list_by_form(form.id)
"""

from repositories.base_repository import BaseRepository
from repositories.form_repository import FormRepository
from repositories.response_repository import ResponseRepository
from repositories.access_token_repository import AccessTokenRepository

__all__ = [
    "BaseRepository",
    "FormRepository",
    "ResponseRepository",
    "AccessTokenRepository",
]
