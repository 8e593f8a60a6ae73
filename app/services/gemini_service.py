# /app/services/gemini_service.py

import logging
from typing import Optional, Protocol

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from google.generativeai.types import GenerationConfig

from app.core.config import get_settings
from app.core.exceptions import GenerationError

from .prompt_library import build_code_generation_prompt

logger = logging.getLogger(__name__)


class CodeProvider(Protocol):
    """The single capability the orchestrator needs from an AI provider."""

    async def complete(self, prompt: str, language: str) -> str: ...


class GeminiCodeProvider:
    """Generates source code with the Gemini API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.google_api_key
        self.model_name = model_name or settings.gemini_model
        self.temperature = temperature if temperature is not None else settings.generation_temperature
        self._configured = False

    def _get_model(self) -> "genai.GenerativeModel":
        if not self.api_key:
            raise GenerationError("The AI provider is not configured (GOOGLE_API_KEY is not set).")
        if not self._configured:
            genai.configure(api_key=self.api_key)
            self._configured = True
        return genai.GenerativeModel(self.model_name)

    async def complete(self, prompt: str, language: str) -> str:
        model = self._get_model()
        config = GenerationConfig(temperature=self.temperature)
        full_prompt = build_code_generation_prompt(prompt, language)
        try:
            response = await model.generate_content_async(full_prompt, generation_config=config)
        except google_exceptions.ResourceExhausted as e:
            logger.error("Gemini rate limit hit: %s", e)
            raise GenerationError("AI provider rate limit exceeded. Please try again later.") from e
        except google_exceptions.GoogleAPICallError as e:
            logger.error("Gemini API call failed: %s", e)
            raise GenerationError(f"AI provider request failed: {e.message}") from e

        if not response.parts:
            # Blocked prompts and empty candidates both come back without parts.
            feedback = getattr(response, "prompt_feedback", None)
            logger.error("Gemini returned no content (feedback: %s)", feedback)
            raise GenerationError("AI model returned an empty response.")
        return response.text


_default_provider: Optional[GeminiCodeProvider] = None


def get_code_provider() -> CodeProvider:
    """FastAPI dependency returning the process-wide provider."""
    global _default_provider
    if _default_provider is None:
        _default_provider = GeminiCodeProvider()
    return _default_provider
