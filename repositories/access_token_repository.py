from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from models.access_token import AccessToken


class AccessTokenRepository:
    """Data access helpers for owner bearer tokens."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_hash(self, key_hash: str) -> Optional[AccessToken]:
        """Fetch a token row by its hash."""
        return self.db.exec(
            select(AccessToken).where(AccessToken.key_hash == key_hash)
        ).first()

    def touch_last_used(self, token: AccessToken) -> AccessToken:
        """Update last_used_at timestamp for a token."""
        token.last_used_at = datetime.utcnow()
        self.db.add(token)
        self.db.commit()
        self.db.refresh(token)
        return token
