# /app/services/generation_service.py

import asyncio
import logging
import re
from datetime import datetime, timezone
from typing import Optional

from app.core.config import get_settings
from app.core.exceptions import GenerationError, ValidationError

from ..models.generation_model import GenerationRecord
from . import language_service
from .database_service import DatabaseService
from .gemini_service import CodeProvider
from .validation import validate_generation_input

logger = logging.getLogger(__name__)

# A whole response wrapped in one Markdown fence, e.g. ```python\n...\n```
_FENCED_BLOCK = re.compile(r"^\s*```[^\n`]*\n(?P<body>.*?)\n?```\s*$", re.DOTALL)


def normalize_code(raw: Optional[str]) -> str:
    """Strips a surrounding code fence and outer blank lines from provider output."""
    if not raw:
        return ""
    match = _FENCED_BLOCK.match(raw)
    code = match.group("body") if match else raw
    return code.strip("\n").rstrip()


async def _call_provider(provider: CodeProvider, prompt: str, language: str, timeout: float) -> str:
    try:
        raw = await asyncio.wait_for(provider.complete(prompt, language), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error("Provider call timed out after %.1fs (language=%s)", timeout, language)
        raise GenerationError(
            f"Code generation timed out after {timeout:g} seconds. Please try again.",
            status_code=504,
        ) from e
    except GenerationError:
        raise
    except Exception as e:
        logger.exception("Provider call failed (language=%s)", language)
        raise GenerationError(f"Failed to generate code: {e}") from e

    code = normalize_code(raw)
    if not code:
        logger.error("Provider returned no usable code (language=%s)", language)
        raise GenerationError("AI model returned an empty or malformed response.")
    return code


async def generate(
    db: DatabaseService,
    provider: CodeProvider,
    prompt: str,
    language: str,
    timeout: Optional[float] = None,
) -> GenerationRecord:
    """
    Validates the request, asks the provider for code and stores the result.
    Nothing is written unless the provider returned usable code, and the
    write only starts after the provider call has finished.
    """
    problems = validate_generation_input(prompt, language)
    if problems:
        raise ValidationError(problems)

    language = language.strip()
    if not language_service.is_supported(language):
        logger.warning("Generating for unrecognized language '%s'", language)

    if timeout is None:
        timeout = get_settings().generation_timeout_seconds
    code = await _call_provider(provider, prompt, language, timeout)

    # The session commits synchronously; keep it off the event loop.
    new_generation = await asyncio.to_thread(db.add_generation_record, {
        "prompt": prompt,
        "language": language,
        "code": code,
        "created_at": datetime.now(timezone.utc),
    })
    logger.info("Stored generation %s (%s, %d chars of code)", new_generation.id, language, len(code))
    return GenerationRecord.model_validate(new_generation)
