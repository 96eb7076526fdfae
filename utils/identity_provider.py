"""
Owner identity resolution.

Bearer tokens are resolved to an owner id by one of two providers:
- TokenTableIdentityProvider: sha256-hashed tokens in the access_tokens table
  (local development, scripts/seed_access_token.py)
- SupabaseIdentityProvider: delegates to a Supabase project's auth endpoint
"""

import hashlib
import logging
from typing import Optional

import httpx
from pydantic import BaseModel
from sqlmodel import Session

from repositories.access_token_repository import AccessTokenRepository

logger = logging.getLogger(__name__)


class OwnerIdentity(BaseModel):
    """Identity resolved from a verified bearer token."""
    owner_id: str
    email: Optional[str] = None
    source: str = "token"


def hash_token(raw_token: str) -> str:
    """Derive deterministic hash for bearer token secrets."""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


class TokenTableIdentityProvider:
    """Looks up hashed bearer tokens in the database."""

    def __init__(self, db: Session):
        self.repo = AccessTokenRepository(db)

    def resolve(self, token: str) -> Optional[OwnerIdentity]:
        record = self.repo.get_by_hash(hash_token(token))
        if not record or not record.is_active:
            return None

        self.repo.touch_last_used(record)
        return OwnerIdentity(owner_id=record.owner_id, source="token")


class SupabaseIdentityProvider:
    """Resolves Supabase access tokens via GET {SUPABASE_URL}/auth/v1/user."""

    def __init__(self, base_url: str, anon_key: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.timeout = timeout

    def resolve(self, token: str) -> Optional[OwnerIdentity]:
        try:
            resp = httpx.get(
                f"{self.base_url}/auth/v1/user",
                headers={"Authorization": f"Bearer {token}", "apikey": self.anon_key},
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.warning("Supabase identity lookup failed: %s", e)
            return None

        if resp.status_code != 200:
            return None

        data = resp.json()
        if not data.get("id"):
            return None
        return OwnerIdentity(owner_id=str(data["id"]), email=data.get("email"), source="supabase")
