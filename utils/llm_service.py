import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from config.settings import settings
from utils.langfuse_config import get_langfuse_handler

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The text-generation provider failed (network, auth, quota, model error)."""


class LLMProvider(Enum):
    GEMINI = "gemini"
    OPENAI = "openai"
    OLLAMA = "ollama"
    OPENROUTER = "openrouter"


def _response_text(response: Any) -> str:
    # LangChain models return text in different formats
    content = response.content
    if isinstance(content, str):
        return content
    if content and isinstance(content[0], dict):
        return content[0].get("text", "")
    return ""


class LLMService:
    """
    Provider-agnostic LLM wrapper that supports:
    - OpenAI
    - OpenRouter (OpenAI-compatible)
    - Gemini
    - Ollama (local, OpenAI-compatible)

    Unlike a best-effort helper, provider failures are raised as
    GenerationError: callers decide whether a failure is fatal (follow-up
    questions) or absorbed into a fallback (candidate summaries).
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: float = 0.7,
    ):
        self.provider = (provider or settings.LLM_PROVIDER).lower()
        self.model_name = model_name or settings.LLM_MODEL
        self.temperature = temperature

        # One chat model per temperature, created lazily
        self._models: Dict[float, Any] = {}

    # ---------------------------------------------------------------------
    # Provider Loader
    # ---------------------------------------------------------------------
    def _load_provider_model(self, temperature: float):
        provider = self.provider

        # ★ OPENAI (native)
        if provider == LLMProvider.OPENAI.value:
            return ChatOpenAI(
                api_key=settings.OPENAI_API_KEY,
                model=self.model_name,
                temperature=temperature,
            )

        # ★ OPENROUTER (OpenAI-compatible API)
        if provider == LLMProvider.OPENROUTER.value:
            return ChatOpenAI(
                api_key=settings.OPENROUTER_API_KEY,
                base_url="https://openrouter.ai/api/v1",
                model=self.model_name,
                temperature=temperature,
            )

        # ★ OLLAMA (OpenAI-compatible)
        if provider == LLMProvider.OLLAMA.value:
            return ChatOpenAI(
                api_key="ollama",  # not used
                base_url="http://localhost:11434/v1",
                model=self.model_name,
                temperature=temperature,
            )

        # ★ GOOGLE GEMINI
        if provider == LLMProvider.GEMINI.value:
            return ChatGoogleGenerativeAI(
                google_api_key=settings.GEMINI_API_KEY,
                model=self.model_name,
                temperature=temperature,
            )

        raise ValueError(f"Unsupported LLM provider: {provider}")

    def _model_for(self, temperature: Optional[float]):
        temp = self.temperature if temperature is None else temperature
        if temp not in self._models:
            self._models[temp] = self._load_provider_model(temp)
        return self._models[temp]

    def _invoke(self, messages: List[BaseMessage], temperature: Optional[float], **kwargs: Any) -> str:
        handler = get_langfuse_handler()
        config = {"callbacks": [handler]} if handler else None

        try:
            response = self._model_for(temperature).invoke(messages, config=config, **kwargs)
        except Exception as e:
            logger.error("LLM call failed (%s/%s): %s", self.provider, self.model_name, e)
            raise GenerationError(str(e)) from e

        return _response_text(response).strip()

    # ---------------------------------------------------------------------
    # Main Text Generator
    # ---------------------------------------------------------------------
    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """
        Generate raw text response from LLM

        Args:
            prompt: The main prompt/question
            system_prompt: Optional system prompt for context
            temperature: Sampling temperature, defaults to the service's

        Returns:
            Raw text response from LLM (stripped)

        Raises:
            GenerationError: If the provider call fails
        """
        messages: List[BaseMessage] = []

        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))

        messages.append(HumanMessage(content=prompt))

        return self._invoke(messages, temperature)

    # ---------------------------------------------------------------------
    # Main JSON Generator
    # ---------------------------------------------------------------------
    def generate_json(
        self,
        system_prompt: str,
        human_prompt: str,
        schema: Dict[str, Any],
        temperature: Optional[float] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Ask for a strict JSON object.

        Returns:
            Parsed JSON dict, or None when the output is not a JSON object

        Raises:
            GenerationError: If the provider call fails
        """
        messages = [
            SystemMessage(content=self._inject_json_rules(system_prompt, schema)),
            HumanMessage(content=human_prompt)
        ]

        # For providers that support response_format, pass it dynamically
        if self.provider in [LLMProvider.OPENAI.value, LLMProvider.OPENROUTER.value]:
            content = self._invoke(messages, temperature, response_format={"type": "json_object"})
        else:
            # For Gemini and Ollama, rely on system prompt enforcement
            content = self._invoke(messages, temperature)

        return parse_json_object(content)

    # ---------------------------------------------------------------------
    # JSON Enforcement Layer
    # ---------------------------------------------------------------------
    def _inject_json_rules(self, system_prompt: str, schema: Dict[str, Any]) -> str:
        """
        Ensures all providers return the correct JSON — especially Ollama and OpenRouter.
        """

        return f"""
{system_prompt}

You MUST return ONLY valid JSON matching this schema:

{json.dumps(schema, indent=2)}

Rules:
- Output **only** a JSON object.
- No commentary, no markdown, no code fences.
- Do not explain the JSON, only output it.
- Keys and structure must match the schema exactly.
"""


def parse_json_object(raw: str) -> Optional[Dict[str, Any]]:
    """
    Parse model output as a JSON object.

    Tolerates a surrounding ``` fence. Returns None for anything that is not a
    JSON object.
    """
    text = (raw or "").strip()
    if text.startswith("```"):
        text = text.strip("`").strip()
        if text.lower().startswith("json"):
            text = text[4:].strip()

    try:
        parsed = json.loads(text)
    except (TypeError, ValueError):
        return None

    return parsed if isinstance(parsed, dict) else None
