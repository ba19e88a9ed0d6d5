"""Static model catalog offered in the comparison UI.

Model ids are globally unique across providers, so a model id alone is
enough to route a card and to reconcile its outcome. Exactly one model per
provider is enabled by default.
"""

from llm_compare.gateway.types import ModelDescriptor, ProviderId

MODELS_BY_PROVIDER: dict[ProviderId, list[ModelDescriptor]] = {
    ProviderId.OPENAI: [
        ModelDescriptor("gpt-5.2", "GPT-5.2", ProviderId.OPENAI, is_default_enabled=True),
        ModelDescriptor("gpt-5-mini", "GPT-5 Mini", ProviderId.OPENAI),
        ModelDescriptor("gpt-4.1", "GPT-4.1", ProviderId.OPENAI),
    ],
    ProviderId.ANTHROPIC: [
        ModelDescriptor("claude-sonnet-4-5", "Claude Sonnet 4.5", ProviderId.ANTHROPIC, is_default_enabled=True),
        ModelDescriptor("claude-haiku-4-5", "Claude Haiku 4.5", ProviderId.ANTHROPIC),
        ModelDescriptor("claude-opus-4-1", "Claude Opus 4.1", ProviderId.ANTHROPIC),
    ],
    ProviderId.GOOGLE: [
        ModelDescriptor("gemini-2.5-flash", "Gemini 2.5 Flash", ProviderId.GOOGLE, is_default_enabled=True),
        ModelDescriptor("gemini-2.5-pro", "Gemini 2.5 Pro", ProviderId.GOOGLE),
        ModelDescriptor("gemini-2.0-flash", "Gemini 2.0 Flash", ProviderId.GOOGLE),
    ],
}

AVAILABLE_MODELS: list[ModelDescriptor] = [m for models in MODELS_BY_PROVIDER.values() for m in models]

_MODELS_BY_ID: dict[str, ModelDescriptor] = {m.id: m for m in AVAILABLE_MODELS}


def get_model_by_id(model_id: str) -> ModelDescriptor | None:
    """Look up a model by id. Returns None if not found."""
    return _MODELS_BY_ID.get(model_id)


def get_providers() -> list[ProviderId]:
    """All providers that have at least one model, in catalog order."""
    return list(dict.fromkeys(m.provider for m in AVAILABLE_MODELS))


def get_models_by_provider() -> dict[ProviderId, list[ModelDescriptor]]:
    """Models grouped by provider (fresh lists, safe to mutate)."""
    grouped: dict[ProviderId, list[ModelDescriptor]] = {}
    for model in AVAILABLE_MODELS:
        grouped.setdefault(model.provider, []).append(model)
    return grouped
