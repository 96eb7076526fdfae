"""
Unit tests for the follow-up question generator.

Run: pytest tests/unit/test_question_generator.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from agents.followup.question_generator import (
    QuestionGenerator,
    RESUME_REQUIRED,
    clean_question,
    fallback_question,
    resume_anchor,
)
from agents.followup.state import FollowupRequest
from config.settings import settings
from utils.llm_service import GenerationError

RESUME = {
    "name": "Jane Doe",
    "work_experience": [{"company": "Acme Logistics", "role": "Engineer"}],
    "projects": [{"name": "Routewise"}],
    "skills": ["Go", "Kubernetes"],
}

GOOD_QUESTION = "At Acme Logistics, why did you move the order pipeline to Kafka consumers?"


def make_request(resume_profile=RESUME, history=None) -> FollowupRequest:
    return FollowupRequest(
        mode="public",
        role_summary="Go services on Kubernetes.",
        base_questions=["Full name"],
        history=history if history is not None else [{"question": "Full name", "answer": "Jane Doe"}],
        resume_profile=resume_profile,
    )


class TestResumeGate:
    """A missing resume short-circuits before any model call."""

    @pytest.mark.parametrize("profile", [None, {}])
    def test_missing_resume_fails_without_llm_call(self, fake_llm, profile):
        result = QuestionGenerator(fake_llm).generate_followup(make_request(resume_profile=profile))

        assert result.ok is False
        assert result.status == 400
        assert result.error == RESUME_REQUIRED
        assert result.question is None
        assert fake_llm.call_count == 0


class TestGenerateFollowup:
    """Model output handling."""

    def test_good_question_returned(self, fake_llm):
        fake_llm.queue(GOOD_QUESTION)
        result = QuestionGenerator(fake_llm).generate_followup(make_request())

        assert result.ok is True
        assert result.question == GOOD_QUESTION
        assert fake_llm.call_count == 1

    def test_prompt_and_temperature_passed_to_llm(self, fake_llm):
        fake_llm.queue(GOOD_QUESTION)
        QuestionGenerator(fake_llm).generate_followup(make_request())

        call = fake_llm.calls[0]
        assert call["temperature"] == settings.QUESTION_TEMPERATURE
        assert "Acme Logistics" in call["prompt"]
        assert "covered_tokens" in call["prompt"]
        assert call["system_prompt"]

    def test_generic_output_replaced_by_fallback(self, fake_llm):
        fake_llm.queue("Tell me about yourself")
        result = QuestionGenerator(fake_llm).generate_followup(make_request())

        assert result.ok is True
        assert result.question == (
            "On Acme Logistics, what tradeoff did you make that you'd handle differently "
            "if the constraints changed (timeline, scale, or reliability)?"
        )

    def test_empty_output_replaced_by_fallback(self, fake_llm):
        fake_llm.queue('  ""  ')
        result = QuestionGenerator(fake_llm).generate_followup(make_request())
        assert result.question == fallback_question(RESUME)

    def test_output_is_cleaned(self, fake_llm):
        fake_llm.queue(f'"- {GOOD_QUESTION}"')
        result = QuestionGenerator(fake_llm).generate_followup(make_request())
        assert result.question == GOOD_QUESTION

    def test_generation_error_propagates(self, fake_llm):
        fake_llm.queue(GenerationError("provider down"))
        with pytest.raises(GenerationError):
            QuestionGenerator(fake_llm).generate_followup(make_request())


class TestFallbackAnchor:
    """Fallback anchor selection."""

    def test_company_first(self):
        assert resume_anchor(RESUME) == "Acme Logistics"

    def test_project_when_no_company(self):
        assert resume_anchor({"work_experience": [], "projects": [{"name": "Routewise"}]}) == "Routewise"

    def test_blank_company_skipped(self):
        profile = {"work_experience": [{"company": "  "}], "projects": [{"name": "Routewise"}]}
        assert resume_anchor(profile) == "Routewise"

    def test_default_anchor(self):
        assert resume_anchor({"skills": ["Go"]}) == "your most recent work"
        assert fallback_question(None).startswith("On your most recent work, ")


class TestCleanQuestion:
    """Tests for clean_question."""

    @pytest.mark.parametrize("raw,expected", [
        ("• How did you size the cluster?", "How did you size the cluster?"),
        ("`How did you size the cluster?`", "How did you size the cluster?"),
        ("'How did you size the cluster?'", "How did you size the cluster?"),
        ("\n  -- How did you size the cluster?", "How did you size the cluster?"),
        ("“How did you size the cluster?”", "How did you size the cluster?"),
        (None, ""),
    ])
    def test_clean(self, raw, expected):
        assert clean_question(raw) == expected
