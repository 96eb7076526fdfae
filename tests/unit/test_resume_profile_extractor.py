"""
Unit tests for resume profile extraction.

Run: pytest tests/unit/test_resume_profile_extractor.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from agents.resume.profile_extractor import ResumeParseError, ResumeProfileExtractor
from utils.document_extractor import DocumentExtractionError

PROFILE = {
    "name": "Jane Doe",
    "email": None,
    "work_experience": [{"company": "Acme", "role": "Engineer", "highlights": []}],
    "skills": ["Go"],
    "education": [],
    "years_experience": 5,
    "projects": [],
}


class TestResumeProfileExtractor:
    """Tests for ResumeProfileExtractor.extract."""

    def test_profile_returned(self, fake_llm):
        fake_llm.queue(PROFILE)
        profile = ResumeProfileExtractor(fake_llm).extract("Jane Doe\nEngineer at Acme")

        assert profile == PROFILE
        call = fake_llm.calls[0]
        assert call["method"] == "generate_json"
        assert call["temperature"] == 0.2
        assert "Engineer at Acme" in call["prompt"]

    @pytest.mark.parametrize("text", ["", "   \n\t", None])
    def test_blank_text_rejected_without_llm_call(self, fake_llm, text):
        with pytest.raises(DocumentExtractionError, match="Could not read text from PDF"):
            ResumeProfileExtractor(fake_llm).extract(text)
        assert fake_llm.call_count == 0

    def test_blank_text_error_is_a_value_error(self, fake_llm):
        with pytest.raises(ValueError):
            ResumeProfileExtractor(fake_llm).extract("")

    def test_unparseable_output(self, fake_llm):
        fake_llm.queue("Sorry, I can't help with that.")
        with pytest.raises(ResumeParseError, match="Failed to parse resume JSON"):
            ResumeProfileExtractor(fake_llm).extract("Jane Doe")

    def test_text_truncated(self, fake_llm):
        fake_llm.queue(PROFILE)
        ResumeProfileExtractor(fake_llm, text_limit=100).extract("a" * 100 + "TAIL")

        prompt = fake_llm.calls[0]["prompt"]
        assert "a" * 100 in prompt
        assert "TAIL" not in prompt
