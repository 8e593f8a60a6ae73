# /tests/test_client_state.py

import json
import math

import httpx
import pytest

from app.client import (
    ApiError,
    CodeCopilotClient,
    ExpandState,
    GenerationRefreshSignal,
    GeneratorView,
    HistoryView,
    format_error_message,
)
from app.client.state import FALLBACK_LANGUAGES


class FakeServer:
    """An in-memory stand-in for the REST API, served through httpx.MockTransport."""

    def __init__(self):
        self.generations = []
        self.fail_languages = False
        self.generate_error = None
        self.history_error = None
        self.history_requests = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/api/languages":
            if self.fail_languages:
                return httpx.Response(503, json={"error": "unavailable"})
            return httpx.Response(200, json={"data": [{"id": 7, "name": "Rust", "extension": ".rs"}]})
        if path == "/api/generate":
            if self.generate_error is not None:
                return httpx.Response(400, json=self.generate_error)
            payload = json.loads(request.content)
            record = {
                "id": len(self.generations) + 1,
                "prompt": payload["prompt"],
                "language": payload["language"],
                "code": "pass",
                "createdAt": "2025-01-01T12:00:00Z",
            }
            self.generations.append(record)
            return httpx.Response(201, json={"data": record})
        if path == "/api/history":
            if self.history_error is not None:
                return httpx.Response(500, json=self.history_error)
            page = int(request.url.params.get("page", 1))
            limit = int(request.url.params.get("limit", 10))
            self.history_requests.append(page)
            newest_first = list(reversed(self.generations))
            total = len(newest_first)
            total_pages = max(1, math.ceil(total / limit))
            return httpx.Response(200, json={"data": {
                "generations": newest_first[(page - 1) * limit: page * limit],
                "pagination": {
                    "currentPage": page,
                    "totalPages": total_pages,
                    "totalItems": total,
                    "itemsPerPage": limit,
                    "hasNextPage": page < total_pages,
                    "hasPreviousPage": page > 1,
                },
            }})
        return httpx.Response(404, json={"error": "Not found"})


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def client(server):
    client = CodeCopilotClient(base_url="http://test", transport=httpx.MockTransport(server.handle))
    yield client
    client.close()


@pytest.fixture
def signal():
    return GenerationRefreshSignal()


# --- Error formatting ---

@pytest.mark.parametrize("payload, expected", [
    ({"errors": ["Prompt is required", "Language is required"]}, "Prompt is required, Language is required"),
    ({"error": "AI provider timed out"}, "AI provider timed out"),
    ({}, "Something went wrong. Please try again."),
    (None, "Something went wrong. Please try again."),
    ({"errors": []}, "Something went wrong. Please try again."),
])
def test_format_error_message(payload, expected):
    assert format_error_message(payload) == expected


def test_client_raises_api_error_with_payload(client, server):
    server.generate_error = {"error": "Prompt is required"}

    with pytest.raises(ApiError) as exc_info:
        client.generate("x", "Python")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Prompt is required"


def test_unreachable_server_is_an_api_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    with CodeCopilotClient(base_url="http://test", transport=httpx.MockTransport(refuse)) as client:
        with pytest.raises(ApiError, match="Could not reach the server"):
            client.get_history()


# --- Expand / collapse ---

def test_expand_state_toggles_and_switches():
    state = ExpandState()

    assert state.toggle(3) == 3
    assert state.toggle(5) == 5
    assert not state.is_expanded(3)
    assert state.toggle(5) is None


# --- Generator view ---

def test_languages_are_loaded_and_first_is_selected(client, signal):
    view = GeneratorView(client, signal)
    view.load_languages()

    assert [lang["name"] for lang in view.languages] == ["Rust"]
    assert view.language == "Rust"


def test_languages_fall_back_when_the_server_fails(client, server, signal):
    server.fail_languages = True
    view = GeneratorView(client, signal)

    view.load_languages()

    assert view.languages == FALLBACK_LANGUAGES
    assert view.language == "Python"


def test_local_validation_blocks_the_request(client, server, signal):
    view = GeneratorView(client, signal)

    assert view.submit(prompt="   ", language="Python") is None
    assert view.error == "Prompt is required"
    assert server.generations == []
    assert signal.version == 0


def test_successful_generation_bumps_the_refresh_signal(client, signal):
    view = GeneratorView(client, signal)

    result = view.submit(prompt="Say hi", language="Python")

    assert result["prompt"] == "Say hi"
    assert view.error is None
    assert view.loading is False
    assert signal.version == 1


def test_failed_generation_shows_joined_errors(client, server, signal):
    server.generate_error = {"errors": ["quota exceeded", "try later"]}
    view = GeneratorView(client, signal)

    assert view.submit(prompt="Say hi", language="Python") is None
    assert view.error == "quota exceeded, try later"
    assert signal.version == 0


# --- History view ---

def test_history_reloads_page_one_after_a_generation(client, server, signal):
    generator = GeneratorView(client, signal)
    history = HistoryView(client, signal, page_size=2)

    assert history.sync() is True
    assert history.items == []
    assert history.sync() is False

    for i in range(5):
        generator.submit(prompt=f"task {i}", language="Python")
    history.load(3)
    assert [item["prompt"] for item in history.items] == ["task 0"]
    history.toggle_item(1)

    assert history.sync() is True
    assert history.current_page == 1
    assert [item["prompt"] for item in history.items] == ["task 4", "task 3"]
    assert history.expand.expanded_id is None


def test_go_to_page_is_clamped(client, server, signal):
    for i in range(5):
        server.generations.append({"id": i + 1, "prompt": f"p{i}", "language": "Go",
                                   "code": "", "createdAt": "2025-01-01T00:00:00Z"})
    history = HistoryView(client, signal, page_size=2)
    history.load(1)

    history.go_to_page(99)
    assert history.current_page == 3
    history.go_to_page(-4)
    assert history.current_page == 1
    assert server.history_requests == [1, 3, 1]


def test_next_and_previous_respect_the_bounds(client, server, signal):
    history = HistoryView(client, signal)
    history.load(1)

    assert history.previous_page() is False
    assert history.next_page() is False


def test_failed_fetch_keeps_the_previous_page(client, server, signal):
    server.generations.append({"id": 1, "prompt": "kept", "language": "Go",
                               "code": "", "createdAt": "2025-01-01T00:00:00Z"})
    history = HistoryView(client, signal)
    history.load(1)
    server.history_error = {"error": "An internal error occurred. Please try again later."}

    assert history.load(1) is False
    assert [item["prompt"] for item in history.items] == ["kept"]
    assert history.error == "An internal error occurred. Please try again later."


def test_history_page_window(client, server, signal):
    for i in range(40):
        server.generations.append({"id": i + 1, "prompt": f"p{i}", "language": "Go",
                                   "code": "", "createdAt": "2025-01-01T00:00:00Z"})
    history = HistoryView(client, signal, page_size=2)
    history.load(8)

    assert history.page_window().pages == [6, 7, 8, 9, 10]
