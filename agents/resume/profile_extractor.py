import logging
from typing import Any, Dict, Optional

from config.settings import settings
from utils.document_extractor import DocumentExtractionError
from utils.llm_service import LLMService
from utils.prompt_loader import PromptLoader

logger = logging.getLogger(__name__)

EMPTY_RESUME_ERROR = "Could not read text from PDF"
PARSE_ERROR = "Failed to parse resume JSON"

RESUME_PROFILE_SCHEMA: Dict[str, Any] = {
    "name": "string",
    "email": "string",
    "work_experience": [
        {
            "company": "string",
            "role": "string",
            "duration": "string",
            "description": "string",
            "highlights": ["string"],
        }
    ],
    "skills": ["string"],
    "education": [{"school": "string", "degree": "string", "major": "string"}],
    "years_experience": "number",
    "projects": [{"name": "string", "description": "string", "technologies": ["string"]}],
}


class ResumeParseError(Exception):
    """The model did not return a usable resume profile."""


class ResumeProfileExtractor:
    """
    Turns raw resume text into the ResumeProfile JSON object the follow-up
    and summary prompts consume.
    """

    def __init__(
        self,
        llm: LLMService,
        prompt_loader: Optional[PromptLoader] = None,
        temperature: Optional[float] = None,
        text_limit: Optional[int] = None,
    ):
        self.llm = llm
        self.prompt_loader = prompt_loader or PromptLoader()
        self.temperature = settings.RESUME_TEMPERATURE if temperature is None else temperature
        self.text_limit = settings.RESUME_TEXT_LIMIT if text_limit is None else text_limit

    def extract(self, resume_text: str) -> Dict[str, Any]:
        """
        Extract a structured profile from resume text.

        Raises:
            DocumentExtractionError: The text is blank
            ResumeParseError: The model output is not a JSON object
            GenerationError: The model call failed
        """
        text = (resume_text or "").strip()
        if not text:
            raise DocumentExtractionError(EMPTY_RESUME_ERROR)

        system_prompt = self.prompt_loader.load("system", mode="resume")
        human_prompt = self.prompt_loader.load(
            "human",
            mode="resume",
            resume_text=text[: self.text_limit],
        )

        profile = self.llm.generate_json(
            system_prompt=system_prompt,
            human_prompt=human_prompt,
            schema=RESUME_PROFILE_SCHEMA,
            temperature=self.temperature,
        )
        if profile is None:
            logger.warning("Resume extraction returned non-JSON output")
            raise ResumeParseError(PARSE_ERROR)

        logger.info(
            "Resume profile extracted: %d jobs, %d skills",
            len(profile.get("work_experience") or []),
            len(profile.get("skills") or []),
        )
        return profile
