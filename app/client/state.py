# /app/client/state.py

"""
View state for a Code Copilot front end.

The generator and history views never reach into each other. They share one
GenerationRefreshSignal: the generator bumps its version after a successful
generation, and the history view reloads page 1 when it sees a new version.
"""

import logging
from typing import Any, Dict, List, Optional

from app.services.validation import validate_generation_input
from app.services.pagination import DEFAULT_PAGE_SIZE, PageWindow, build_pagination, compute_page_window

from .api_client import ApiError, CodeCopilotClient

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGES: List[Dict[str, Any]] = [
    {"id": 1, "name": "Python", "extension": ".py"},
    {"id": 2, "name": "JavaScript", "extension": ".js"},
    {"id": 3, "name": "TypeScript", "extension": ".ts"},
    {"id": 4, "name": "C++", "extension": ".cpp"},
]


class GenerationRefreshSignal:
    """Monotonic version counter; one increment per successful generation."""

    def __init__(self):
        self.version = 0

    def notify(self) -> int:
        self.version += 1
        return self.version


class ExpandState:
    """At most one history item is expanded at a time."""

    def __init__(self):
        self.expanded_id: Optional[int] = None

    def toggle(self, item_id: int) -> Optional[int]:
        self.expanded_id = None if self.expanded_id == item_id else item_id
        return self.expanded_id

    def is_expanded(self, item_id: int) -> bool:
        return self.expanded_id == item_id

    def reset(self) -> None:
        self.expanded_id = None


class GeneratorView:
    def __init__(self, client: CodeCopilotClient, refresh_signal: GenerationRefreshSignal):
        self.client = client
        self.refresh_signal = refresh_signal
        self.languages: List[Dict[str, Any]] = []
        self.language: str = ""
        self.prompt: str = ""
        self.result: Optional[Dict[str, Any]] = None
        self.error: Optional[str] = None
        self.loading = False

    def load_languages(self) -> List[Dict[str, Any]]:
        try:
            languages = self.client.get_languages()
        except ApiError as e:
            # The generator stays usable with a built-in list.
            logger.warning("Failed to fetch languages, using fallback list: %s", e)
            self.languages = list(FALLBACK_LANGUAGES)
            self.language = "Python"
            return self.languages

        self.languages = languages
        if languages:
            self.language = languages[0]["name"]
        return self.languages

    def submit(self, prompt: Optional[str] = None, language: Optional[str] = None) -> Optional[Dict[str, Any]]:
        if prompt is not None:
            self.prompt = prompt
        if language is not None:
            self.language = language

        problems = validate_generation_input(self.prompt, self.language)
        if problems:
            self.error = ", ".join(problems)
            return None

        self.loading = True
        self.error = None
        self.result = None
        try:
            self.result = self.client.generate(self.prompt, self.language)
        except ApiError as e:
            self.error = e.message
            return None
        finally:
            self.loading = False

        self.refresh_signal.notify()
        return self.result

    def clear(self) -> None:
        self.prompt = ""
        self.result = None
        self.error = None


class HistoryView:
    def __init__(self, client: CodeCopilotClient, refresh_signal: GenerationRefreshSignal,
                 page_size: int = DEFAULT_PAGE_SIZE):
        self.client = client
        self.refresh_signal = refresh_signal
        self.page_size = page_size
        self.items: List[Dict[str, Any]] = []
        self.pagination: Dict[str, Any] = build_pagination(1, page_size, 0)
        self.error: Optional[str] = None
        self.loading = False
        self.expand = ExpandState()
        self._seen_version: Optional[int] = None

    @property
    def current_page(self) -> int:
        return self.pagination["currentPage"]

    @property
    def total_pages(self) -> int:
        return self.pagination["totalPages"]

    def load(self, page: int = 1) -> bool:
        """Fetches a page; items and pagination change together, and only on success."""
        self.loading = True
        self.error = None
        try:
            data = self.client.get_history(page=page, limit=self.page_size)
        except ApiError as e:
            self.error = e.message if e.payload else "Failed to load history"
            return False
        finally:
            self.loading = False

        self.items, self.pagination = data.get("generations", []), data["pagination"]
        return True

    def go_to_page(self, page: int) -> bool:
        page = max(1, min(page, self.total_pages))
        return self.load(page)

    def next_page(self) -> bool:
        if not self.pagination["hasNextPage"]:
            return False
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> bool:
        if not self.pagination["hasPreviousPage"]:
            return False
        return self.go_to_page(self.current_page - 1)

    def sync(self) -> bool:
        """Reloads page 1 if a generation succeeded since the last sync (or on first use)."""
        if self._seen_version == self.refresh_signal.version:
            return False
        self._seen_version = self.refresh_signal.version
        self.expand.reset()
        self.error = None
        return self.load(1)

    def toggle_item(self, item_id: int) -> Optional[int]:
        return self.expand.toggle(item_id)

    def page_window(self, max_pages: int = 5) -> PageWindow:
        return compute_page_window(self.current_page, self.total_pages, max_pages)
