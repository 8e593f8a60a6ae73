# /app/client/api_client.py

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong. Please try again."


class ApiError(Exception):
    """A non-2xx response (or no response at all) from the Code Copilot API."""

    def __init__(self, payload: Optional[Dict[str, Any]] = None, status_code: Optional[int] = None):
        self.payload = payload or {}
        self.status_code = status_code
        super().__init__(format_error_message(self.payload))

    @property
    def message(self) -> str:
        return format_error_message(self.payload)


def format_error_message(payload: Optional[Dict[str, Any]], fallback: str = DEFAULT_ERROR_MESSAGE) -> str:
    """
    Turns an error body into one display string. A list of `errors` is joined,
    otherwise the single `error` is used, otherwise the fallback.
    """
    if not payload:
        return fallback
    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        return ", ".join(str(e) for e in errors)
    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    return fallback


class CodeCopilotClient:
    """Thin synchronous wrapper over the REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 90.0,
                 transport: Optional[httpx.BaseTransport] = None):
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CodeCopilotClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Request %s %s failed: %s", method, url, e)
            raise ApiError({"error": "Could not reach the server. Please check your connection."}) from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_error:
            raise ApiError(body if isinstance(body, dict) else {}, status_code=response.status_code)
        return body

    def get_languages(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/languages").get("data", [])

    def generate(self, prompt: str, language: str) -> Dict[str, Any]:
        return self._request("POST", "/api/generate", json={"prompt": prompt, "language": language})["data"]

    def get_history(self, page: int = 1, limit: int = 10) -> Dict[str, Any]:
        return self._request("GET", "/api/history", params={"page": page, "limit": limit})["data"]
