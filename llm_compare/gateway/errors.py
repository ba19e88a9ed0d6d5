"""Error taxonomy and the shared Error Classifier.

Every adapter reports non-success HTTP responses through ``classify_error``
so that failure categories read the same in a side-by-side view no matter
which vendor produced them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

AUTH_FAILED = "Authentication failed. Check your API token."
RATE_LIMITED = "Rate limit exceeded. Try again later."
MODEL_NOT_FOUND = "Model not found. It may not be available."
SERVER_ERROR = "Provider server error. Try again later."
NETWORK_ERROR = "Network error. Check your connection."
NO_CONTENT = "No content in response."
UNEXPECTED_ERROR = "Unexpected error."


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ClientInputError(ValueError):
    """Raised when a comparison request is rejected before dispatch."""


class UnknownProviderError(LookupError):
    """Raised when no adapter is registered for a provider identifier."""

    def __init__(self, provider: object):
        self.provider = getattr(provider, "value", provider)
        super().__init__(f"Unknown provider: {self.provider}")


class ProviderError(Exception):
    """Raised when a provider call fails; ``str(exc)`` is the user-facing message."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthenticationError(ProviderError):
    pass


class RateLimitError(ProviderError):
    pass


class ModelNotFoundError(ProviderError):
    pass


class ProviderServerError(ProviderError):
    pass


class ProviderApiError(ProviderError):
    """Any other non-success response (vendor message or generic fallback)."""


class ProviderTimeoutError(ProviderError):
    pass


class NetworkError(ProviderError):
    pass


class EmptyContentError(ProviderError):
    pass


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------


def _vendor_message(body: Any) -> str | None:
    """Extract ``body["error"]["message"]`` if it is a string."""
    if not isinstance(body, Mapping):
        return None
    error = body.get("error")
    if not isinstance(error, Mapping):
        return None
    message = error.get("message")
    return message if isinstance(message, str) else None


# Priority order, first match wins. Drives both the message and the exception type.
_STATUS_CATEGORIES: tuple[tuple[Callable[[int], bool], str, type[ProviderError]], ...] = (
    (lambda status: status in (401, 403), AUTH_FAILED, AuthenticationError),
    (lambda status: status == 429, RATE_LIMITED, RateLimitError),
    (lambda status: status == 404, MODEL_NOT_FOUND, ModelNotFoundError),
    (lambda status: status >= 500, SERVER_ERROR, ProviderServerError),
)


def _status_category(status_code: int) -> tuple[str, type[ProviderError]] | None:
    for matches, message, cls in _STATUS_CATEGORIES:
        if matches(status_code):
            return message, cls
    return None


def classify_error(status_code: int, body: Any, vendor_name: str) -> str:
    """Map a vendor HTTP status + parsed error body to a failure category.

    First match wins:
      401/403 -> auth, 429 -> rate limit, 404 -> model not found,
      5xx -> server error, then the vendor's own error message,
      then "<Vendor> API error: <status>".
    """
    category = _status_category(status_code)
    if category is not None:
        return category[0]
    message = _vendor_message(body)
    if message is not None:
        return message
    return f"{vendor_name} API error: {status_code}"


def error_for_status(status_code: int, body: Any, vendor_name: str) -> ProviderError:
    """Build the taxonomy exception for a non-success response."""
    category = _status_category(status_code)
    cls = category[1] if category is not None else ProviderApiError
    return cls(classify_error(status_code, body, vendor_name), status_code=status_code)
