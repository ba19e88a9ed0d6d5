import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from llm_compare.api.v1.router import api_v1_router
from llm_compare.core.config import settings, validate_settings_for_production
from llm_compare.core.logging import setup_logging
from llm_compare.gateway.errors import UnknownProviderError
from llm_compare.gateway.orchestrator import ComparisonOrchestrator
from llm_compare.gateway.registry import default_registry

# Configure logging before anything else
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    validate_settings_for_production()
    registry = default_registry()
    app.state.registry = registry
    app.state.orchestrator = ComparisonOrchestrator(registry)
    logger.info("Starting %s with providers: %s", settings.app_name, ", ".join(p.value for p in registry.providers()))

    yield

    # Shutdown
    logger.info("%s shut down", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs" if settings.app_debug else None,
    redoc_url="/api/redoc" if settings.app_debug else None,
)


# Request bodies carry API tokens: report where validation failed, never what was sent
@app.exception_handler(RequestValidationError)
async def _request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [{k: v for k, v in err.items() if k not in ("input", "ctx")} for err in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


@app.exception_handler(UnknownProviderError)
async def _unknown_provider_handler(request: Request, exc: UnknownProviderError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# Log unhandled exceptions with the full traceback
@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled %s on %s %s:\n%s", type(exc).__name__, request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": f"{type(exc).__name__}: {exc}"})


# CORS: parse allowed_origins from settings (comma-separated)
_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(api_v1_router)


@app.get("/api/v1/health")
async def health(request: Request):
    registry = getattr(request.app.state, "registry", None)
    return {
        "status": "ok",
        "providers": [p.value for p in registry.providers()] if registry else [],
    }


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("llm_compare.main:app", host=settings.app_host, port=settings.app_port)
