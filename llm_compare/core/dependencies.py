from fastapi import Request

from llm_compare.core.exceptions import ServiceUnavailableError
from llm_compare.gateway.orchestrator import ComparisonOrchestrator
from llm_compare.gateway.registry import ProviderRegistry


def get_registry(request: Request) -> ProviderRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise ServiceUnavailableError("Provider registry not initialized")
    return registry


def get_orchestrator(request: Request) -> ComparisonOrchestrator:
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise ServiceUnavailableError("Comparison orchestrator not initialized")
    return orchestrator
