"""Reviews FastAPI application.

Usage:
    uvicorn reviews.app:create_app --factory --host 0.0.0.0 --port 8000

The services (repository, id generator, clock) are built once per
application and closed when it shuts down.
"""

from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reviews.api.routes import register_exception_handlers, review_router
from reviews.config import Settings
from reviews.container import ReviewServices, build_services
from reviews.utils.logging import add_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)


def create_app(services: ReviewServices | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    if services is None:
        configure_logging(settings)
        services = build_services(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("reviews_app_started", env=settings.env, repository=type(services.repository).__name__)
        yield
        await services.close()
        logger.info("reviews_app_stopped")

    app = FastAPI(
        title="Reviews API",
        description="Submit and list text reviews",
        lifespan=lifespan,
    )
    app.state.services = services
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind request details into every log line emitted while serving it."""
        add_context(
            request_id=request.headers.get("x-request-id") or uuid4().hex,
            method=request.method,
            path=request.url.path,
        )
        try:
            return await call_next(request)
        finally:
            clear_context()

    app.include_router(review_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "repository": settings.repository})

    return app

