"""Credential check endpoint used by the token fields."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from llm_compare.core.dependencies import get_registry
from llm_compare.gateway.registry import ProviderRegistry
from llm_compare.schemas.compare import ValidateTokenRequest, ValidateTokenResponse

router = APIRouter(prefix="/validate-token", tags=["validate-token"])


@router.post("", response_model=ValidateTokenResponse)
async def validate_token(
    body: ValidateTokenRequest,
    registry: ProviderRegistry = Depends(get_registry),
):
    if not body.token.strip():
        return JSONResponse(
            status_code=400,
            content=ValidateTokenResponse(valid=False, error="Missing provider or token").model_dump(),
        )

    adapter = registry.resolve(body.provider)
    valid = await adapter.validate_credential(body.token)
    return ValidateTokenResponse(valid=valid)
