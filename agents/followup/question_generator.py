"""
Follow-up question generator.

Builds a bounded prompt from the role summary, base questions, history and
resume profile, asks the model for exactly one question, cleans it, and falls
back to a deterministic resume-anchored question when the output is empty or
fails the quality gate.

Transport failures are NOT replaced by the fallback: GenerationError
propagates so the caller can report "AI request failed".
"""

import logging
import re
from typing import Any, Dict, Optional

from agents.followup.prompt_builder import PromptLimits, build_followup_prompt
from agents.followup.quality_gate import is_too_generic
from agents.followup.state import FollowupRequest, FollowupResult
from agents.followup.topics import build_covered_topics
from config.settings import settings
from utils.llm_service import LLMService
from utils.prompt_loader import PromptLoader

logger = logging.getLogger(__name__)

RESUME_REQUIRED = "Resume required"

DEFAULT_ANCHOR = "your most recent work"

FALLBACK_TEMPLATE = (
    "On {anchor}, what tradeoff did you make that you'd handle differently "
    "if the constraints changed (timeline, scale, or reliability)?"
)

_LEADING_NOISE = re.compile(r"^[\"'`“”‘’•\-\s]+")
_TRAILING_QUOTES = re.compile(r"[\"'`“”‘’]+$")


def has_resume_profile(resume_profile: Optional[Dict[str, Any]]) -> bool:
    """An empty object counts as no resume."""
    return bool(resume_profile)


def clean_question(raw: Optional[str]) -> str:
    """Strip leading quotes/bullets/dashes and trailing quotes from model output."""
    text = (raw or "").strip()
    text = _LEADING_NOISE.sub("", text)
    text = _TRAILING_QUOTES.sub("", text)
    return text.strip()


def _first_named(items: Any, key: str) -> Optional[str]:
    if isinstance(items, list) and items and isinstance(items[0], dict):
        value = items[0].get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def resume_anchor(resume_profile: Optional[Dict[str, Any]]) -> str:
    """Most recent company, else first project, else a neutral phrase."""
    profile = resume_profile or {}
    return (
        _first_named(profile.get("work_experience"), "company")
        or _first_named(profile.get("projects"), "name")
        or DEFAULT_ANCHOR
    )


def fallback_question(resume_profile: Optional[Dict[str, Any]]) -> str:
    return FALLBACK_TEMPLATE.format(anchor=resume_anchor(resume_profile))


class QuestionGenerator:
    """Generates one resume-anchored follow-up question per call."""

    def __init__(
        self,
        llm: LLMService,
        prompt_loader: Optional[PromptLoader] = None,
        temperature: Optional[float] = None,
        limits: Optional[PromptLimits] = None,
    ):
        self.llm = llm
        self.prompt_loader = prompt_loader or PromptLoader()
        self.temperature = settings.QUESTION_TEMPERATURE if temperature is None else temperature
        self.limits = limits or PromptLimits.from_settings()

    def generate_followup(self, request: FollowupRequest) -> FollowupResult:
        """
        Generate the next follow-up question.

        Returns:
            FollowupResult.success(question), or a 400 failure when no resume
            profile is available (the model is not called in that case)

        Raises:
            GenerationError: If the model call itself fails
        """
        # Enforced here as well as by callers so a client cannot skip it
        if not has_resume_profile(request.resume_profile):
            return FollowupResult.failure(RESUME_REQUIRED, status=400)

        covered = build_covered_topics(request.history)
        prompt = build_followup_prompt(
            request,
            covered,
            temperature=self.temperature,
            prompt_loader=self.prompt_loader,
            limits=self.limits,
        )

        raw = self.llm.generate(
            prompt=prompt.user,
            system_prompt=prompt.system,
            temperature=prompt.temperature,
        )
        question = clean_question(raw)

        if not question or is_too_generic(question):
            logger.info("Follow-up rejected by quality gate (%s): %r", request.mode, question[:120])
            question = fallback_question(request.resume_profile)

        return FollowupResult.success(question)
