# /app/services/validation.py

# Input rules shared by the server and the client views. Nothing here may
# import configuration, the database or the provider SDK.

from typing import List, Optional

MAX_PROMPT_LENGTH = 5000


def validate_generation_input(prompt: Optional[str], language: Optional[str]) -> List[str]:
    """Returns the violated constraints, in order; an empty list means valid."""
    problems = []
    if prompt is None or not prompt.strip():
        problems.append("Prompt is required")
    elif len(prompt) > MAX_PROMPT_LENGTH:
        problems.append(f"Prompt must be at most {MAX_PROMPT_LENGTH} characters")
    if language is None or not language.strip():
        problems.append("Language is required")
    return problems
