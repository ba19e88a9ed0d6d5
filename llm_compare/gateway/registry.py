"""Provider Registry — fixed lookup from provider id to its adapter."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from llm_compare.gateway.errors import UnknownProviderError
from llm_compare.gateway.types import ProviderId
from llm_compare.gateway.vendor_adapters import ADAPTER_CLASSES, BaseProviderAdapter


class ProviderRegistry:
    """Read-only provider table.

    The table is frozen at construction, so any number of concurrent
    comparisons and validation machines may resolve through one instance.

    Usage:
        registry = default_registry()
        adapter = registry.resolve("openai")
        ok = await adapter.validate_credential("sk-...")
    """

    def __init__(self, adapters: Mapping[ProviderId, BaseProviderAdapter]):
        self._adapters: Mapping[ProviderId, BaseProviderAdapter] = MappingProxyType(dict(adapters))

    def resolve(self, provider: ProviderId | str) -> BaseProviderAdapter:
        """Return the adapter for ``provider``; raise UnknownProviderError otherwise."""
        try:
            key = ProviderId(provider)
        except ValueError:
            raise UnknownProviderError(provider) from None
        adapter = self._adapters.get(key)
        if adapter is None:
            raise UnknownProviderError(key)
        return adapter

    def providers(self) -> list[ProviderId]:
        return list(self._adapters)

    def __contains__(self, provider: object) -> bool:
        try:
            self.resolve(provider)  # type: ignore[arg-type]
        except UnknownProviderError:
            return False
        return True


def default_registry(**adapter_kwargs) -> ProviderRegistry:
    """Factory: registry with one adapter per supported vendor."""
    return ProviderRegistry({provider: cls(**adapter_kwargs) for provider, cls in ADAPTER_CLASSES.items()})
