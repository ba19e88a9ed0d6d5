"""Comparison endpoint — one prompt, several models, side-by-side."""

import logging

from fastapi import APIRouter, Depends

from llm_compare.core.dependencies import get_orchestrator
from llm_compare.core.exceptions import BadRequestError
from llm_compare.gateway.errors import ClientInputError
from llm_compare.gateway.orchestrator import ComparisonOrchestrator
from llm_compare.schemas.compare import CompareRequest, CompareResponse, ModelResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/compare", tags=["compare"])


@router.post("", response_model=CompareResponse)
async def compare_models(
    body: CompareRequest,
    orchestrator: ComparisonOrchestrator = Depends(get_orchestrator),
):
    """Send the prompt to every requested model and return one response per model.

    Per-model failures come back as ``status: "error"`` entries; only an
    empty prompt or an empty model list fails the whole request.
    """
    try:
        outcomes = await orchestrator.compare(body.prompt, [m.to_item() for m in body.models])
    except ClientInputError as e:
        raise BadRequestError(str(e)) from e

    return CompareResponse(responses=[ModelResponse.from_outcome(o) for o in outcomes])
