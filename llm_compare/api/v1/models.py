"""Static model catalog endpoint."""

from fastapi import APIRouter

from llm_compare.data.models import get_models_by_provider, get_providers
from llm_compare.gateway.types import ModelDescriptor
from llm_compare.schemas.compare import ModelCatalogResponse, ModelInfo

router = APIRouter(prefix="/models", tags=["models"])


def _to_info(model: ModelDescriptor) -> ModelInfo:
    return ModelInfo(
        id=model.id,
        display_name=model.display_name,
        provider=model.provider,
        is_default_enabled=model.is_default_enabled,
    )


@router.get("", response_model=ModelCatalogResponse)
async def list_models():
    """Models grouped by provider. No auth required."""
    grouped = get_models_by_provider()
    return ModelCatalogResponse(
        providers=get_providers(),
        models={provider.value: [_to_info(m) for m in models] for provider, models in grouped.items()},
    )
