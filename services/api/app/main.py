"""FastAPI application setup, error mapping and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.auth import AuthGateMiddleware
from app.errors import DistillError
from app.llm import CompletionClient
from app.routers.drafts import router as drafts_router
from app.routers.summarize import router as summarize_router
from app.settings import Settings, settings as default_settings
from app.storage import DraftStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to serve without model credentials.
    app.state.completions = CompletionClient.from_settings(app.state.settings)
    logger.info("Distill API starting env=%s model=%s", app.state.settings.app_env, app.state.settings.openai_model)
    try:
        yield
    finally:
        await app.state.completions.close()
        app.state.completions = None


async def distill_error_handler(request: Request, exc: DistillError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Request to %s failed: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Processing error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Failed to process content. Please try again."})


def create_app(settings: Settings = default_settings) -> FastAPI:
    """Build the application around one explicit settings object."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Distill API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.completions = None
    app.state.drafts = DraftStore.from_settings(settings)

    app.add_middleware(AuthGateMiddleware, session_cookie=settings.session_cookie)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DistillError, distill_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(summarize_router, prefix="/api", tags=["summarize"])
    app.include_router(drafts_router, prefix="/api", tags=["drafts"])

    @app.get("/health")
    def health():
        """Return a simple health payload for uptime checks."""
        return {"status": "ok", "env": settings.app_env}

    return app


app = create_app()
