"""
Main entry point for the Screenform follow-up loop.

Runs one candidate session in the terminal: base questions, adaptive AI
follow-ups until the form's cap is reached, then submission and summary.
"""

from sqlmodel import Session

from agents.followup.controller import FollowupController
from agents.followup.question_generator import QuestionGenerator
from agents.resume.profile_extractor import ResumeProfileExtractor
from agents.summarization.candidate_summary import CandidateSummaryGenerator
from config.settings import settings
from services import FormService, ResponseService
from utils.database import create_tables, get_engine
from utils.llm_service import LLMService

DEMO_OWNER = "demo-owner"


def ask(prompt: str) -> str:
    while True:
        answer = input(f"{prompt}\nYou: ").strip()
        if answer.lower() in ['quit', 'exit', 'q']:
            raise SystemExit("\nExiting early.")
        if answer:
            print()
            return answer
        print("Please provide an answer, or type 'quit' to exit.\n")


def main():
    print("=" * 80)
    print("Screenform - Adaptive Follow-up Demo")
    print("=" * 80)
    print()

    # Initialize database
    engine = get_engine()
    create_tables(engine)

    llm = LLMService(temperature=settings.QUESTION_TEMPERATURE)
    controller = FollowupController(QuestionGenerator(llm))

    with Session(engine) as db_session:
        form_service = FormService(db_session)
        response_service = ResponseService(db_session, controller, CandidateSummaryGenerator(llm))

        form = form_service.create_form(
            owner_id=DEMO_OWNER,
            name="Backend Engineer",
            summary="Own Go services on Kubernetes; on-call; small platform team.",
            base_questions=["Full name", "Why are you interested in this role?"],
            ai_enabled=True,
            max_ai_questions=2,
        )
        access = form_service.resolve_owner_access(form.id, DEMO_OWNER)

        # Sample resume for testing
        resume_text = """
        Jane Doe
        Software Engineer, Acme Logistics (2020 - present)
        - Migrated order pipeline from cron jobs to Kafka consumers in Go
        - Ran the Kubernetes cluster upgrade from 1.21 to 1.27
        Projects: Routewise (route optimizer, Python, OR-Tools)
        Skills: Go, Kubernetes, Kafka, PostgreSQL, Python
        """

        print("Extracting resume profile...")
        resume_profile = ResumeProfileExtractor(llm).extract(resume_text)
        print(f"Resume profile: {resume_profile.get('name')} / {resume_profile.get('skills')}\n")

        history = []
        for question in form.base_questions:
            history.append({"question": question, "answer": ask(f"Form: {question}")})

        # Follow-up loop
        while True:
            outcome = controller.request_next(access, history, resume_profile)
            if outcome.done:
                print(f"All {outcome.used} follow-up questions answered.\n")
                break

            print(f"[{outcome.used + 1}/{outcome.used + outcome.remaining}]")
            history.append({"question": outcome.question, "answer": ask(f"Interviewer: {outcome.question}")})

        response = response_service.submit(access, history, resume_profile)

        print("=" * 80)
        print(f"CANDIDATE SUMMARY ({response.summary_status})")
        print("=" * 80)
        summary = response.summary or {}
        print(f"\n{summary.get('candidate_name')}: {summary.get('one_liner')}")
        for strength in summary.get("strengths", []):
            print(f"  + {strength}")
        for risk in summary.get("risks", []):
            print(f"  - {risk}")
        print(f"\nNext step: {summary.get('recommended_next_step')}")
        print(f"Chips: {', '.join(summary.get('strength_chips', []))}")


if __name__ == "__main__":
    main()
