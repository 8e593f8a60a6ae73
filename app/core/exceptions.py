# /app/core/exceptions.py

from typing import List, Optional, Sequence, Union


class CopilotError(Exception):
    """
    Base class for every error the API turns into an HTTP error response.
    An error holds either one message or an ordered list of messages; the
    response body mirrors that shape as `{"error": ...}` or `{"errors": [...]}`.
    """

    status_code: int = 500

    def __init__(self, messages: Union[str, Sequence[str]], status_code: Optional[int] = None):
        if isinstance(messages, str):
            self.messages: List[str] = [messages]
        else:
            self.messages = list(messages)
        if not self.messages:
            raise ValueError("An error must carry at least one message.")
        if status_code is not None:
            self.status_code = status_code
        super().__init__("; ".join(self.messages))

    @property
    def is_multiple(self) -> bool:
        return len(self.messages) > 1

    def to_payload(self) -> dict:
        if self.is_multiple:
            return {"errors": list(self.messages)}
        return {"error": self.messages[0]}


class ValidationError(CopilotError):
    """Malformed input: empty or oversized prompt, missing language."""

    status_code = 400


class GenerationError(CopilotError):
    """The AI provider failed: timeout, API error, rate limit or unusable output."""

    status_code = 502


class StoreError(CopilotError):
    """
    A durable read or write failed. The detail is kept for the logs only;
    the client always receives the generic message.
    """

    status_code = 500
    PUBLIC_MESSAGE = "An internal error occurred. Please try again later."

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)

    def to_payload(self) -> dict:
        return {"error": self.PUBLIC_MESSAGE}
