"""
FastAPI application factory.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fieldops.api.middleware.error_handler import ErrorHandlerMiddleware
from fieldops.api.middleware.logging import LoggingMiddleware
from fieldops.api.routes import health, job_types, jobs, workflows
from fieldops.config.database import close_database_connections
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Application startup",
        environment=settings.ENVIRONMENT,
        transition_policy=settings.JOB_TRANSITION_POLICY,
    )
    yield
    await close_database_connections()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    docs_enabled = settings.DEBUG or settings.ENABLE_SWAGGER
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Job lifecycle, technician assignment and scheduling for field-service companies",
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if docs_enabled else None,
        docs_url=f"{settings.API_PREFIX}/docs" if docs_enabled else None,
        redoc_url=f"{settings.API_PREFIX}/redoc" if docs_enabled else None,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom middleware
    ErrorHandlerMiddleware(app)
    LoggingMiddleware(app)

    # Add routes
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(job_types.router, prefix=settings.API_PREFIX)
    app.include_router(jobs.router, prefix=settings.API_PREFIX)
    app.include_router(workflows.router, prefix=settings.API_PREFIX)

    return app
