"""
FastAPI dependency providers.

Every external collaborator (LLM, storage, database session) is created here
and injected into agents and services, so tests can swap any of them through
app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends
from sqlmodel import Session

from agents.followup.controller import FollowupController
from agents.followup.question_generator import QuestionGenerator
from agents.resume.profile_extractor import ResumeProfileExtractor
from agents.summarization.candidate_summary import CandidateSummaryGenerator
from config.settings import settings
from services import FormService, ResponseService, ResumeService
from utils.database import get_db
from utils.llm_service import LLMService
from utils.prompt_loader import PromptLoader
from utils.storage import LocalResumeStorage


@lru_cache()
def get_llm_service() -> LLMService:
    return LLMService(temperature=settings.QUESTION_TEMPERATURE)


@lru_cache()
def get_prompt_loader() -> PromptLoader:
    return PromptLoader()


@lru_cache()
def get_storage() -> LocalResumeStorage:
    return LocalResumeStorage()


def get_question_generator(
    llm: LLMService = Depends(get_llm_service),
    prompt_loader: PromptLoader = Depends(get_prompt_loader),
) -> QuestionGenerator:
    return QuestionGenerator(llm, prompt_loader=prompt_loader)


def get_followup_controller(
    generator: QuestionGenerator = Depends(get_question_generator),
) -> FollowupController:
    return FollowupController(generator)


def get_summary_generator(
    llm: LLMService = Depends(get_llm_service),
    prompt_loader: PromptLoader = Depends(get_prompt_loader),
) -> CandidateSummaryGenerator:
    return CandidateSummaryGenerator(llm, prompt_loader=prompt_loader)


def get_resume_extractor(
    llm: LLMService = Depends(get_llm_service),
    prompt_loader: PromptLoader = Depends(get_prompt_loader),
) -> ResumeProfileExtractor:
    return ResumeProfileExtractor(llm, prompt_loader=prompt_loader)


def get_form_service(db: Session = Depends(get_db)) -> FormService:
    return FormService(db)


def get_response_service(
    db: Session = Depends(get_db),
    controller: FollowupController = Depends(get_followup_controller),
    summary_generator: CandidateSummaryGenerator = Depends(get_summary_generator),
) -> ResponseService:
    return ResponseService(db, controller, summary_generator)


def get_resume_service(
    storage: LocalResumeStorage = Depends(get_storage),
    extractor: ResumeProfileExtractor = Depends(get_resume_extractor),
) -> ResumeService:
    return ResumeService(storage, extractor)
