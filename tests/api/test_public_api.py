"""
API tests for the public (share-token) candidate surface.

Run: pytest tests/api/test_public_api.py -v
"""

import sys
from pathlib import Path
from types import SimpleNamespace

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import PyPDF2
import pytest
from utils.document_extractor import DocumentExtractor
from utils.llm_service import GenerationError
from utils import storage as storage_module

RESUME = {"name": "Jane Doe", "work_experience": [{"company": "Acme"}], "skills": ["Go", "Kubernetes"]}
BASE = [{"question": "Full name", "answer": "Jane Doe"}]
QUESTION = "At Acme, why did you choose Kafka consumers over cron jobs?"


class TestGetPublicForm:
    """GET /public/forms/{shareToken}"""

    def test_public_form(self, client, make_form):
        form = make_form()
        response = client.get(f"/public/forms/{form.share_token}")

        assert response.status_code == 200
        body = response.json()["form"]
        assert body["name"] == "Backend Engineer"
        assert body["baseQuestions"] == ["Full name"]
        assert "share_token" not in body
        assert "owner_id" not in body

    def test_unknown_token(self, client):
        response = client.get("/public/forms/deadbeef")
        assert response.status_code == 404
        assert response.json() == {"error": "Form not found"}

    def test_private_form(self, client, make_form):
        form = make_form(is_public=False)
        response = client.get(f"/public/forms/{form.share_token}")
        assert response.status_code == 403
        assert response.json() == {"error": "Form is not public"}


class TestPublicFollowup:
    """POST /public/forms/{shareToken}/ai-next"""

    def test_next_question(self, client, make_form, fake_llm):
        form = make_form()
        fake_llm.queue(QUESTION)

        response = client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"history": BASE, "resumeProfile": RESUME},
        )

        assert response.status_code == 200
        assert response.json() == {"nextQuestion": QUESTION, "done": False, "aiUsed": 0, "aiRemaining": 2}

    def test_private_form_reveals_nothing(self, client, make_form, fake_llm):
        form = make_form(is_public=False)

        response = client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"history": BASE, "resumeProfile": RESUME},
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Form is not public"}
        assert fake_llm.call_count == 0

    def test_summary_override_ignored(self, client, make_form, fake_llm):
        form = make_form(summary="Stored summary")
        fake_llm.queue(QUESTION)

        client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"summary": "Injected", "history": BASE, "resumeProfile": RESUME},
        )

        assert "Injected" not in fake_llm.calls[0]["prompt"]
        assert "Stored summary" in fake_llm.calls[0]["prompt"]

    def test_ai_disabled(self, client, make_form):
        form = make_form(ai_enabled=False)
        response = client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"history": BASE, "resumeProfile": RESUME},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "AI follow-ups disabled for this form."}

    @pytest.mark.parametrize("profile", [None, {}])
    def test_resume_required(self, client, make_form, fake_llm, profile):
        form = make_form()
        response = client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"history": BASE, "resumeProfile": profile},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Resume required"}
        assert fake_llm.call_count == 0

    def test_next_question_after_skipped_followup(self, client, make_form, fake_llm):
        form = make_form(max_ai_questions=2)
        fake_llm.queue("Which Kafka limit did you hit first at Acme?")

        response = client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"history": BASE + [{"question": QUESTION, "answer": ""}], "resumeProfile": RESUME},
        )

        assert response.status_code == 200
        assert response.json() == {
            "nextQuestion": "Which Kafka limit did you hit first at Acme?",
            "done": False,
            "aiUsed": 1,
            "aiRemaining": 1,
        }

    def test_exhausted_returns_submit_signal(self, client, make_form, fake_llm):
        form = make_form(max_ai_questions=2)
        history = BASE + [
            {"question": QUESTION, "answer": "Throughput."},
            {"question": "Which Kafka limit did you hit first at Acme?", "answer": "Partitions."},
        ]

        response = client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"history": history, "resumeProfile": RESUME},
        )

        assert response.status_code == 200
        assert response.json() == {"nextQuestion": None, "done": True, "aiUsed": 2, "aiRemaining": 0}
        assert fake_llm.call_count == 0

    def test_generation_failure(self, client, make_form, fake_llm):
        form = make_form()
        fake_llm.queue(GenerationError("upstream 503"))

        response = client.post(
            f"/public/forms/{form.share_token}/ai-next",
            json={"history": BASE, "resumeProfile": RESUME},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "AI request failed"}


class TestPublicResumeUpload:
    """POST /public/forms/{shareToken}/resume"""

    def test_pdf_upload(self, client, make_form, fake_llm, monkeypatch):
        form = make_form()
        monkeypatch.setattr(DocumentExtractor, "extract_pdf_text", staticmethod(lambda content: "Jane Doe\nGo at Acme"))
        fake_llm.queue(RESUME)

        response = client.post(
            f"/public/forms/{form.share_token}/resume",
            files={"resume": ("Jane Doe CV.pdf", b"%PDF-1.4 fake", "application/pdf")},
        )

        assert response.status_code == 200, response.text
        body = response.json()
        assert body["resumeProfile"] == RESUME
        assert body["resumePath"].startswith(f"public/{form.id}/")
        assert body["resumePath"].endswith("_Jane_Doe_CV.pdf")
        assert body["resumeUrl"].startswith("file://")

    def test_same_file_twice_in_one_millisecond(self, client, make_form, fake_llm, monkeypatch):
        form = make_form()
        monkeypatch.setattr(DocumentExtractor, "extract_pdf_text", staticmethod(lambda content: "Jane Doe\nGo at Acme"))
        monkeypatch.setattr(storage_module, "time", SimpleNamespace(time=lambda: 1700000000.123))
        fake_llm.queue(RESUME, RESUME)

        paths = []
        for _ in range(2):
            response = client.post(
                f"/public/forms/{form.share_token}/resume",
                files={"resume": ("cv.pdf", b"%PDF-1.4 fake", "application/pdf")},
            )
            assert response.status_code == 200, response.text
            paths.append(response.json()["resumePath"])

        assert paths[0] != paths[1]

    def test_not_a_pdf(self, client, make_form, fake_llm):
        form = make_form()
        response = client.post(
            f"/public/forms/{form.share_token}/resume",
            files={"resume": ("cv.docx", b"PK...", "application/vnd.openxmlformats-officedocument.wordprocessingml.document")},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Resume must be a PDF"}
        assert fake_llm.call_count == 0

    def test_no_file(self, client, make_form):
        form = make_form()
        response = client.post(f"/public/forms/{form.share_token}/resume")
        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}

    def test_unreadable_pdf(self, client, make_form, monkeypatch):
        form = make_form()
        monkeypatch.setattr(DocumentExtractor, "extract_pdf_text", staticmethod(lambda content: "   "))

        response = client.post(
            f"/public/forms/{form.share_token}/resume",
            files={"resume": ("cv.pdf", b"%PDF-1.4 fake", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Could not read text from PDF"}

    def test_malformed_pdf(self, client, make_form, fake_llm, monkeypatch):
        form = make_form()

        def broken_reader(*args, **kwargs):
            raise KeyError("/Root")

        monkeypatch.setattr(PyPDF2, "PdfReader", broken_reader)

        response = client.post(
            f"/public/forms/{form.share_token}/resume",
            files={"resume": ("cv.pdf", b"%PDF-1.4 broken", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Could not read text from PDF"}
        assert fake_llm.call_count == 0

    def test_unparseable_profile(self, client, make_form, fake_llm, monkeypatch):
        form = make_form()
        monkeypatch.setattr(DocumentExtractor, "extract_pdf_text", staticmethod(lambda content: "Jane Doe"))
        fake_llm.queue("no json here")

        response = client.post(
            f"/public/forms/{form.share_token}/resume",
            files={"resume": ("cv.pdf", b"%PDF-1.4 fake", "application/pdf")},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to parse resume JSON"}

    def test_private_form(self, client, make_form):
        form = make_form(is_public=False)
        response = client.post(
            f"/public/forms/{form.share_token}/resume",
            files={"resume": ("cv.pdf", b"%PDF-1.4 fake", "application/pdf")},
        )
        assert response.status_code == 403
