"""Core types and DTOs for the Provider Gateway Layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ProviderId(str, Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"


class OutcomeStatus(str, Enum):
    """Terminal status of one comparison item."""

    SUCCESS = "success"
    ERROR = "error"


class ValidationStatus(str, Enum):
    """Lifecycle of a single credential field."""

    IDLE = "idle"
    VALIDATING = "validating"
    VALID = "valid"
    INVALID = "invalid"


# ---------------------------------------------------------------------------
# Catalog entry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModelDescriptor:
    """A model offered in the comparison UI."""

    id: str  # sent to the provider API, e.g. "gpt-5.2"
    display_name: str  # e.g. "GPT-5.2"
    provider: ProviderId
    is_default_enabled: bool = False


# ---------------------------------------------------------------------------
# Comparison request / outcome
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ComparisonRequestItem:
    """One card of a comparison: which provider/model to ask, and with which key."""

    provider: ProviderId | str
    model_id: str
    credential: str = field(repr=False)


@dataclass(frozen=True)
class ProviderCallResult:
    """Successful generate() payload."""

    content: str


@dataclass(frozen=True)
class ComparisonOutcome:
    """Unified per-item result of a comparison.

    Same structure regardless of which provider produced it. Exactly one of
    ``content`` / ``error`` is set, matching ``status``.
    """

    model_id: str
    content: str | None
    error: str | None
    latency_ms: int
    status: OutcomeStatus

    def __post_init__(self) -> None:
        if (self.content is None) == (self.error is None):
            raise ValueError("Exactly one of content/error must be set")
        if self.status == OutcomeStatus.SUCCESS and self.content is None:
            raise ValueError("Successful outcome requires content")
        if self.status == OutcomeStatus.ERROR and self.error is None:
            raise ValueError("Failed outcome requires an error message")
        if self.latency_ms < 0:
            raise ValueError("latency_ms must be non-negative")

    @classmethod
    def success(cls, model_id: str, content: str, latency_ms: int) -> ComparisonOutcome:
        return cls(
            model_id=model_id,
            content=content,
            error=None,
            latency_ms=latency_ms,
            status=OutcomeStatus.SUCCESS,
        )

    @classmethod
    def failure(cls, model_id: str, error: str, latency_ms: int = 0) -> ComparisonOutcome:
        return cls(
            model_id=model_id,
            content=None,
            error=error,
            latency_ms=latency_ms,
            status=OutcomeStatus.ERROR,
        )

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict for the API."""
        return {
            "model_id": self.model_id,
            "content": self.content,
            "error": self.error,
            "latency_ms": self.latency_ms,
            "status": self.status.value,
        }
