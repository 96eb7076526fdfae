"""Seed script to insert an owner access token for local development/testing.

Usage:
  python scripts/seed_access_token.py
  python scripts/seed_access_token.py --token my-secret-token --owner recruiter-1
  python scripts/seed_access_token.py --reset
"""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import argparse
from sqlmodel import Session, select
from sqlalchemy import delete

from config.settings import settings
from models.access_token import AccessToken
from utils.database import create_tables, get_engine
from utils.identity_provider import hash_token

DEFAULT_RAW_TOKEN = "screenform-dev-token"
DEFAULT_NAME = "local-dev"
DEFAULT_OWNER = "local-owner"


def seed_access_token(
    raw_token: str = DEFAULT_RAW_TOKEN,
    owner_id: str = DEFAULT_OWNER,
    reset: bool = False,
) -> bool:
    if not settings.DATABASE_URL:
        print("ERROR: DATABASE_URL not set in environment/.env", file=sys.stderr)
        return False

    engine = get_engine()
    create_tables(engine)
    key_hash = hash_token(raw_token)

    try:
        with Session(engine) as db:
            if reset:
                res = db.exec(delete(AccessToken).where(AccessToken.key_hash == key_hash))
                deleted = res.rowcount if res.rowcount else 0
                db.commit()
                print(f"Reset: removed {deleted} existing token(s)")

            existing = db.exec(
                select(AccessToken).where(AccessToken.key_hash == key_hash)
            ).first()

            if existing:
                print(f"Access token already exists (name={existing.name}, owner={existing.owner_id})")
                return True

            token = AccessToken(
                key_hash=key_hash,
                name=DEFAULT_NAME,
                owner_id=owner_id,
            )
            db.add(token)
            db.commit()

            print("Access token seeded successfully:")
            print(f"  Raw token: {raw_token}")
            print(f"  Hash:      {key_hash[:16]}...")
            print(f"  Owner:     {owner_id}")
            print(f"  Header:    Authorization: Bearer {raw_token}")
            return True

    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return False


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed an owner access token for local dev/testing")
    parser.add_argument("--token", default=DEFAULT_RAW_TOKEN, help=f"Raw token value (default: {DEFAULT_RAW_TOKEN})")
    parser.add_argument("--owner", default=DEFAULT_OWNER, help=f"Owner id the token resolves to (default: {DEFAULT_OWNER})")
    parser.add_argument("--reset", action="store_true", help="Remove existing token before inserting")
    args = parser.parse_args()

    ok = seed_access_token(raw_token=args.token, owner_id=args.owner, reset=args.reset)
    sys.exit(0 if ok else 1)
