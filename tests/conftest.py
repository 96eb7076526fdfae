"""
Shared pytest fixtures.

Provides a scripted fake LLM, an in-memory SQLite database and a FastAPI
TestClient wired to both through dependency overrides.
"""

import sys
from pathlib import Path
from typing import Generator

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from models.access_token import AccessToken
from models.form import Form
from utils.database import create_tables, get_db
from utils.identity_provider import hash_token
from utils.llm_service import parse_json_object
from utils.storage import LocalResumeStorage

OWNER_ID = "owner-1"
OWNER_TOKEN = "owner-token"
OTHER_OWNER_ID = "owner-2"
OTHER_OWNER_TOKEN = "other-owner-token"


class FakeLLM:
    """
    Scripted stand-in for LLMService.

    Each queued item is returned by the next generate/generate_json call; an
    Exception instance is raised instead. An empty queue yields "".
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def _next(self):
        if not self.responses:
            return ""
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def generate(self, prompt, system_prompt=None, temperature=None):
        self.calls.append({
            "method": "generate",
            "prompt": prompt,
            "system_prompt": system_prompt,
            "temperature": temperature,
        })
        return self._next()

    def generate_json(self, system_prompt, human_prompt, schema, temperature=None):
        self.calls.append({
            "method": "generate_json",
            "prompt": human_prompt,
            "system_prompt": system_prompt,
            "temperature": temperature,
        })
        item = self._next()
        if isinstance(item, dict):
            return item
        return parse_json_object(item)


# ==================== LLM Fixtures ====================

@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


# ==================== Database Fixtures ====================

@pytest.fixture
def db_engine():
    """Fresh in-memory database per test, shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine) -> Generator[Session, None, None]:
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def make_form(db_session):
    """Factory inserting a form owned by OWNER_ID unless told otherwise."""

    def _make_form(**overrides) -> Form:
        values = {
            "owner_id": OWNER_ID,
            "name": "Backend Engineer",
            "summary": "Go services on Kubernetes.",
            "base_questions": ["Full name"],
            "ai_enabled": True,
            "max_ai_questions": 2,
            "is_public": True,
        }
        values.update(overrides)
        form = Form(**values)
        db_session.add(form)
        db_session.commit()
        db_session.refresh(form)
        return form

    return _make_form


# ==================== API Fixtures ====================

@pytest.fixture
def storage(tmp_path) -> LocalResumeStorage:
    return LocalResumeStorage(root_dir=str(tmp_path / "resumes"))


@pytest.fixture
def client(db_session, fake_llm, storage) -> Generator[TestClient, None, None]:
    """
    TestClient with the database, LLM and storage overridden.

    Not used as a context manager so the lifespan hook never touches the
    configured DATABASE_URL.
    """
    from api.main import app
    from api.dependencies import get_llm_service, get_storage

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm_service] = lambda: fake_llm
    app.dependency_overrides[get_storage] = lambda: storage

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def owner_headers(db_session) -> dict:
    """Seeds bearer tokens for two owners; returns headers for the first."""
    db_session.add(AccessToken(key_hash=hash_token(OWNER_TOKEN), name="test", owner_id=OWNER_ID))
    db_session.add(AccessToken(key_hash=hash_token(OTHER_OWNER_TOKEN), name="other", owner_id=OTHER_OWNER_ID))
    db_session.commit()
    return {"Authorization": f"Bearer {OWNER_TOKEN}"}


@pytest.fixture
def other_owner_headers(owner_headers) -> dict:
    return {"Authorization": f"Bearer {OTHER_OWNER_TOKEN}"}
