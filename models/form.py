from datetime import datetime
from typing import List, Optional
import secrets

from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON, Text

DEFAULT_MAX_AI_QUESTIONS = 2
MAX_AI_QUESTIONS_LIMIT = 20


def make_share_token() -> str:
    """Random, unguessable token used for unauthenticated public access."""
    return secrets.token_hex(16)


class Form(SQLModel, table=True):
    """
    Owner-created hiring form.

    Base questions are always asked first and in order. When ``ai_enabled`` is
    set, up to ``max_ai_questions`` adaptive follow-ups are generated per
    candidate response. ``is_public`` gates access through ``share_token``.
    """
    __tablename__ = "forms"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: str = Field(index=True, nullable=False)

    name: str = Field(default="")
    summary: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    base_questions: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Follow-up configuration
    ai_enabled: bool = Field(default=False)
    max_ai_questions: int = Field(default=DEFAULT_MAX_AI_QUESTIONS)  # 0..MAX_AI_QUESTIONS_LIMIT

    # Visibility
    is_public: bool = Field(default=False)
    share_token: str = Field(default_factory=make_share_token, index=True, unique=True)
    archived: bool = Field(default=False, index=True)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
