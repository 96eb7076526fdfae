"""
Candidate summary generator.

Turns a finished response (answers + resume profile) into a short
hiring-manager readout. One model call, no state. Any failure, transport or
parse, degrades to a deterministic summary built from the inputs; the failure
stays visible through SummaryResult.ok / SummaryResult.error.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from config.settings import settings
from utils.llm_service import GenerationError, LLMService, parse_json_object
from utils.prompt_loader import PromptLoader

logger = logging.getLogger(__name__)

DEFAULT_CANDIDATE_NAME = "Candidate"
DEFAULT_NEXT_STEP = "Review application and choose next steps."
FALLBACK_NEXT_STEP = "Review application details and decide whether to screen."
FALLBACK_RISK = "AI summary failed to generate; review resume and answers manually."

MAX_STRENGTHS = 5
MAX_RISKS = 3
MAX_CHIPS = 6

_NAME_QUESTION = re.compile(r"name", re.IGNORECASE)


@dataclass
class SummaryResult:
    """
    Outcome of one summary generation.

    ``summary`` is always a valid summary object; when ``ok`` is False it is
    the deterministic fallback and ``error`` says why.
    """
    summary: Dict[str, Any]
    ok: bool
    error: Optional[str] = None


def derive_candidate_name(answers: List[Dict[str, Any]], resume_profile: Optional[Dict[str, Any]]) -> str:
    """First answered "name" question, then the resume name, then "Candidate"."""
    for qa in answers or []:
        if not isinstance(qa, dict):
            continue
        if _NAME_QUESTION.search(str(qa.get("question") or "")):
            answer = str(qa.get("answer") or "").strip()
            if answer:
                return answer
            break

    name = (resume_profile or {}).get("name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return DEFAULT_CANDIDATE_NAME


def _resume_skills(resume_profile: Optional[Dict[str, Any]]) -> List[str]:
    skills = (resume_profile or {}).get("skills")
    if not isinstance(skills, list):
        return []
    return [str(s).strip() for s in skills if s is not None and str(s).strip()]


def _string_list(value: Any, limit: int) -> List[str]:
    if not isinstance(value, list):
        return []
    items = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return items[:limit]


def _string(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def fallback_summary(candidate_name: str, form_name: str, resume_profile: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    skills = _resume_skills(resume_profile)[:MAX_CHIPS]
    return {
        "candidate_name": candidate_name,
        "one_liner": f"{candidate_name} applied for {form_name or 'this role'}.",
        "strengths": [f"Skills listed: {', '.join(skills)}"] if skills else [],
        "risks": [FALLBACK_RISK],
        "recommended_next_step": FALLBACK_NEXT_STEP,
        "strength_chips": skills,
    }


def normalize_summary(parsed: Dict[str, Any], candidate_name: str) -> Dict[str, Any]:
    """Coerce model output to the summary schema; never returns None fields."""
    return {
        "candidate_name": _string(parsed.get("candidate_name"), candidate_name),
        "one_liner": _string(parsed.get("one_liner"), ""),
        "strengths": _string_list(parsed.get("strengths"), MAX_STRENGTHS),
        "risks": _string_list(parsed.get("risks"), MAX_RISKS),
        "recommended_next_step": _string(parsed.get("recommended_next_step"), DEFAULT_NEXT_STEP),
        "strength_chips": _string_list(parsed.get("strength_chips"), MAX_CHIPS),
    }


class CandidateSummaryGenerator:
    """Produces the structured candidate summary for a response."""

    def __init__(
        self,
        llm: LLMService,
        prompt_loader: Optional[PromptLoader] = None,
        temperature: Optional[float] = None,
        answer_limit: Optional[int] = None,
    ):
        self.llm = llm
        self.prompt_loader = prompt_loader or PromptLoader()
        self.temperature = settings.SUMMARY_TEMPERATURE if temperature is None else temperature
        self.answer_limit = settings.SUMMARY_ANSWER_LIMIT if answer_limit is None else answer_limit

    def build_input(
        self,
        form_name: str,
        form_summary: str,
        answers: List[Dict[str, Any]],
        resume_profile: Optional[Dict[str, Any]],
        candidate_name: str,
    ) -> Dict[str, Any]:
        return {
            "form": {"name": form_name or "", "summary": form_summary or ""},
            "candidate": {"name": candidate_name},
            "resumeProfile": resume_profile or {},
            "answers": list(answers or [])[: self.answer_limit],
        }

    def generate(
        self,
        form_name: str = "",
        form_summary: str = "",
        answers: Optional[List[Dict[str, Any]]] = None,
        resume_profile: Optional[Dict[str, Any]] = None,
    ) -> SummaryResult:
        """Generate a summary; never raises."""
        answers = answers or []
        candidate_name = derive_candidate_name(answers, resume_profile)

        try:
            system_prompt = self.prompt_loader.load("system", mode="summarization")
            human_prompt = self.prompt_loader.load(
                "human",
                mode="summarization",
                input_json=json.dumps(
                    self.build_input(form_name, form_summary, answers, resume_profile, candidate_name),
                    indent=2,
                    ensure_ascii=False,
                    default=str,
                ),
            )
            raw = self.llm.generate(
                prompt=human_prompt,
                system_prompt=system_prompt,
                temperature=self.temperature,
            )
        except (GenerationError, FileNotFoundError, ValueError) as e:
            logger.warning("Candidate summary generation failed: %s", e)
            return SummaryResult(
                summary=fallback_summary(candidate_name, form_name, resume_profile),
                ok=False,
                error=f"generation failed: {e}",
            )

        parsed = parse_json_object(raw)
        if not parsed or not _string(parsed.get("one_liner"), ""):
            logger.warning("Candidate summary was not valid JSON with a one_liner")
            return SummaryResult(
                summary=fallback_summary(candidate_name, form_name, resume_profile),
                ok=False,
                error="unparseable summary output",
            )

        return SummaryResult(summary=normalize_summary(parsed, candidate_name), ok=True)


def generate_summary(
    llm: LLMService,
    form_name: str = "",
    form_summary: str = "",
    answers: Optional[List[Dict[str, Any]]] = None,
    resume_profile: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Convenience wrapper returning only the summary object."""
    return CandidateSummaryGenerator(llm).generate(
        form_name=form_name,
        form_summary=form_summary,
        answers=answers,
        resume_profile=resume_profile,
    ).summary
