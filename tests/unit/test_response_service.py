"""
Unit tests for ResponseService submissions.

Run: pytest tests/unit/test_response_service.py -v
"""

import json
import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from sqlmodel import select

from agents.followup.controller import AccessContext, FollowupController
from agents.followup.question_generator import QuestionGenerator
from agents.summarization.candidate_summary import CandidateSummaryGenerator
from models.response import FormResponse, SummaryStatus
from repositories import ResponseRepository
from services.response_service import ResponseService

RESUME = {"name": "Jane Doe", "skills": ["Go", "Kubernetes"]}
BASE = [{"question": "Full name", "answer": "Jane Doe"}]
SUMMARY = {
    "candidate_name": "Jane Doe",
    "one_liner": "Go engineer with production Kubernetes experience.",
    "strengths": ["Kubernetes operations"],
    "risks": [],
    "recommended_next_step": "Schedule a technical screen.",
    "strength_chips": ["Go"],
}


@pytest.fixture
def service(db_session, fake_llm) -> ResponseService:
    return ResponseService(
        db_session,
        FollowupController(QuestionGenerator(fake_llm)),
        CandidateSummaryGenerator(fake_llm),
    )


class TestSubmit:
    """Submissions are summarized, then written in one insert."""

    def test_skipped_followup_is_accepted(self, service, make_form, fake_llm, db_session):
        form = make_form(max_ai_questions=2)
        answers = BASE + [
            {"question": "Q1 about Acme?", "answer": ""},
            {"question": "Q2 about Acme?", "answer": "real answer"},
        ]
        fake_llm.queue(json.dumps(SUMMARY))

        response = service.submit(AccessContext.public(form), answers, RESUME)

        assert response.answers == answers
        rows = db_session.exec(select(FormResponse)).all()
        assert len(rows) == 1

    def test_row_written_with_final_summary(self, service, make_form, fake_llm, db_session, monkeypatch):
        form = make_form()
        fake_llm.queue(json.dumps(SUMMARY))

        def no_second_write(*args, **kwargs):
            raise AssertionError("submission must not update the row after inserting it")

        monkeypatch.setattr(ResponseRepository, "update_summary", no_second_write)

        response = service.submit(AccessContext.public(form), BASE, RESUME)

        assert response.summary_status == SummaryStatus.GENERATED
        assert response.summary == SUMMARY
        assert response.summarized_at is not None

    def test_fallback_written_with_error(self, service, make_form, fake_llm):
        form = make_form()
        fake_llm.queue("not json")

        response = service.submit(AccessContext.public(form), BASE, RESUME)

        assert response.summary_status == SummaryStatus.FALLBACK
        assert response.summary_error
        assert response.summary["one_liner"] == "Jane Doe applied for Backend Engineer."

    def test_nothing_stored_when_summarizing_crashes(self, service, make_form, fake_llm, db_session):
        form = make_form()
        fake_llm.queue(RuntimeError("connection reset"))

        with pytest.raises(RuntimeError):
            service.submit(AccessContext.public(form), BASE, RESUME)

        assert db_session.exec(select(FormResponse)).all() == []
