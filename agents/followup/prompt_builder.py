"""
Pure prompt construction for follow-up questions.

No I/O beyond reading templates: the same inputs always produce the same
PromptRequest, so context bounding can be tested without a model.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from agents.followup.state import FollowupRequest, PromptRequest
from config.settings import settings
from utils.prompt_loader import PromptLoader


@dataclass(frozen=True)
class PromptLimits:
    role_summary_chars: int = 1200
    base_questions: int = 12
    history_entries: int = 12

    @classmethod
    def from_settings(cls) -> "PromptLimits":
        return cls(
            role_summary_chars=settings.ROLE_SUMMARY_LIMIT,
            base_questions=settings.PROMPT_BASE_QUESTION_LIMIT,
            history_entries=settings.PROMPT_HISTORY_LIMIT,
        )


def build_followup_context(
    request: FollowupRequest,
    covered_topics: List[str],
    limits: Optional[PromptLimits] = None,
) -> Dict[str, Any]:
    """
    Bounded model context for one follow-up.

    Only the last ``history_entries`` turns are kept, so the model does not
    see the whole conversation once it grows past that.
    """
    limits = limits or PromptLimits()
    history = list(request.history or [])

    return {
        "mode": request.mode,
        "role_summary": (request.role_summary or "")[: limits.role_summary_chars],
        "base_questions": list(request.base_questions or [])[: limits.base_questions],
        "history": history[-limits.history_entries:] if limits.history_entries else [],
        "resume": request.resume_profile or {},
        "covered_tokens": covered_topics,
    }


def build_followup_prompt(
    request: FollowupRequest,
    covered_topics: List[str],
    temperature: float,
    prompt_loader: Optional[PromptLoader] = None,
    limits: Optional[PromptLimits] = None,
) -> PromptRequest:
    loader = prompt_loader or PromptLoader()
    context = build_followup_context(request, covered_topics, limits)

    return PromptRequest(
        system=loader.load("system", mode="followup"),
        user=loader.load(
            "human",
            mode="followup",
            input_json=json.dumps(context, ensure_ascii=False, default=str),
        ),
        temperature=temperature,
    )
