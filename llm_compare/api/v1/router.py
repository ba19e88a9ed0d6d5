from fastapi import APIRouter

from llm_compare.api.v1.compare import router as compare_router
from llm_compare.api.v1.models import router as models_router
from llm_compare.api.v1.validate_token import router as validate_token_router

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(compare_router)
api_v1_router.include_router(validate_token_router)
api_v1_router.include_router(models_router)
