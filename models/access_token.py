from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field


class AccessToken(SQLModel, table=True):
    """Stores hashed owner bearer tokens for the built-in identity provider."""

    __tablename__ = "access_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)
    key_hash: str = Field(index=True, nullable=False, sa_column_kwargs={"unique": True})
    name: str = Field(nullable=False)
    owner_id: str = Field(index=True, nullable=False)
    is_active: bool = Field(default=True, nullable=False)
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    last_used_at: Optional[datetime] = Field(default=None, nullable=True)
