# /app/services/language_service.py

import logging
from typing import Dict, List, Optional, Tuple

from ..models.language_model import Language

logger = logging.getLogger(__name__)

# (name, extension) in display order; ids follow this order starting at 1.
SUPPORTED_LANGUAGES: Tuple[Tuple[str, str], ...] = (
    ("Python", ".py"),
    ("JavaScript", ".js"),
    ("TypeScript", ".ts"),
    ("C++", ".cpp"),
    ("Java", ".java"),
    ("Go", ".go"),
    ("Rust", ".rs"),
    ("C#", ".cs"),
)

_language_cache: List[Language] = []
_languages_by_name: Dict[str, Language] = {}


def initialize_language_cache() -> None:
    """Builds the registry once; called from the application lifespan hook."""
    global _language_cache, _languages_by_name
    _language_cache = [
        Language(id=index, name=name, extension=extension)
        for index, (name, extension) in enumerate(SUPPORTED_LANGUAGES, start=1)
    ]
    _languages_by_name = {language.name: language for language in _language_cache}
    logger.info("Language registry initialized with %d languages", len(_language_cache))


def list_languages() -> List[Language]:
    if not _language_cache:
        initialize_language_cache()
    return list(_language_cache)


def get_language(name: str) -> Optional[Language]:
    if not _languages_by_name:
        initialize_language_cache()
    return _languages_by_name.get(name)


def is_supported(name: str) -> bool:
    return get_language(name) is not None
