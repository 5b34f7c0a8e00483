"""
Application factory for the Mensa Menu API.

create_app() wires the routers, CORS, rate limiting and error handlers around
a ServiceContainer. The lifespan starts the daily cache sweep and closes the
container on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from .config import CORS_ORIGINS
from .container import ServiceContainer, build_container
from .errors import ValidationError
from .rate_limit import limiter
from .routes import admin_router, explain_router, menu_router, translate_router

logger = logging.getLogger(__name__)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [str(error.get("msg", "")) for error in exc.errors()]
    logger.info("Rejected request to %s: %s", request.url.path, details)
    return JSONResponse(status_code=400, content={"error": "Invalid request", "details": details})


async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


def create_app(
    container: Optional[ServiceContainer] = None,
    background_sweep: bool = True,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        container: Services to serve. Built from config when omitted.
        background_sweep: Run the daily cache sweep while the app is up.

    Returns:
        Configured FastAPI application
    """
    if container is None:
        container = build_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if background_sweep:
            await container.sweeper.start_background_sweep()
        try:
            yield
        finally:
            await container.close()

    app = FastAPI(
        title="Mensa Menu API",
        description="Daily Mensa menu with cached translations and dish explanations",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=CORS_ORIGINS != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Cache", "X-Cache-Date", "X-Language", "X-Translated-Items", "X-Translated-Names"],
    )

    # Configure rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(ValidationError, _validation_error_handler)

    app.include_router(menu_router)
    app.include_router(translate_router)
    app.include_router(explain_router)
    app.include_router(admin_router)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    def health_check():
        return {"status": "healthy", "cache": type(container.translation_store).__name__}

    logger.info("Application created")
    return app
