"""Error taxonomy for the request pipeline."""

from collections.abc import Callable
from enum import Enum


class ErrorKind(str, Enum):
    AUTH_FAILURE = "auth_failure"
    EMPTY_CONTENT = "empty_content"
    TIMEOUT = "timeout"
    UNCLASSIFIED = "unclassified"


USER_MESSAGES = {
    ErrorKind.AUTH_FAILURE: (
        "Authentication failed. Check your API key "
        "(ask --api-key YOUR_KEY, ASK_CLI_API_KEY or GOOGLE_API_KEY)."
    ),
    ErrorKind.EMPTY_CONTENT: "Model returned empty output.",
    ErrorKind.TIMEOUT: "The model request timed out. Try again later.",
    ErrorKind.UNCLASSIFIED: "LLM call failed.",
}

_AUTH_MARKERS = (
    "api key",
    "api_key",
    "apikey",
    "authentication",
    "unauthorized",
    "permission denied",
)
_TIMEOUT_MARKERS = ("timeout", "timed out")

ErrorClassifier = Callable[[str], ErrorKind]


class AskError(Exception):
    """Base class for errors surfaced to the user."""


class CompletionError(AskError):
    """A model call that produced no usable answer."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self.user_message)

    @property
    def user_message(self) -> str:
        base = USER_MESSAGES[self.kind]
        if self.detail and self.kind is ErrorKind.UNCLASSIFIED:
            return f"{base} {self.detail}"
        return base


def classify_error(message: str) -> ErrorKind:
    """Map a free-text transport error message to an ErrorKind."""
    lowered = message.lower()
    if not lowered.strip():
        return ErrorKind.UNCLASSIFIED
    if any(marker in lowered for marker in _AUTH_MARKERS):
        return ErrorKind.AUTH_FAILURE
    if any(marker in lowered for marker in _TIMEOUT_MARKERS):
        return ErrorKind.TIMEOUT
    return ErrorKind.UNCLASSIFIED
