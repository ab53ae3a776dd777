"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from student_registry.config import get_settings
from student_registry.infrastructure.dependencies import get_student_store
from student_registry.infrastructure.logging.log_config import setup_logging
from student_registry.presentation.api.router import router as api_router
from student_registry.presentation.api.v1.endpoints.students import request_validation_error_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and load persisted records."""
    setup_logging()

    store = get_student_store()
    if store.persistence_warning:
        logger.warning("Starting without durable storage: %s", store.persistence_warning)
    else:
        logger.info("Loaded %d student record(s)", len(store))

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Malformed bodies report errors in the same shape as rejected fields
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "student_registry.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
