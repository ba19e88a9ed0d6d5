"""Comparison and token validation schemas (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from llm_compare.gateway.types import ComparisonOutcome, ComparisonRequestItem, ProviderId


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompareModelRequest(_CamelModel):
    provider: ProviderId
    model_id: str = Field(min_length=1, max_length=200)
    token: str = Field(repr=False)  # never echoed back

    def to_item(self) -> ComparisonRequestItem:
        return ComparisonRequestItem(provider=self.provider, model_id=self.model_id, credential=self.token)


class CompareRequest(_CamelModel):
    # Blank prompts and empty lists are rejected by the orchestrator (400), not here (422)
    prompt: str
    models: list[CompareModelRequest]


class ModelResponse(_CamelModel):
    model_id: str
    content: str | None
    error: str | None
    latency_ms: int
    status: str  # success | error

    @classmethod
    def from_outcome(cls, outcome: ComparisonOutcome) -> "ModelResponse":
        return cls(
            model_id=outcome.model_id,
            content=outcome.content,
            error=outcome.error,
            latency_ms=outcome.latency_ms,
            status=outcome.status.value,
        )


class CompareResponse(_CamelModel):
    responses: list[ModelResponse]


class ValidateTokenRequest(_CamelModel):
    provider: ProviderId
    token: str = Field(repr=False)


class ValidateTokenResponse(_CamelModel):
    valid: bool
    error: str | None = None


class ModelInfo(_CamelModel):
    id: str
    display_name: str
    provider: ProviderId
    is_default_enabled: bool


class ModelCatalogResponse(_CamelModel):
    providers: list[ProviderId]
    models: dict[str, list[ModelInfo]]
