"""Membership Intake - application intake and review service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from intake.core.config import settings
from intake.core.exceptions import (
    IntakeError,
    intake_exception_handler,
    request_validation_exception_handler,
)
from intake.core.storage import ApplicationStorage
from intake.routers import applications_router, reports_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    storage: ApplicationStorage = app.state.storage
    logger.info("Initializing database...")
    await storage.init_models()
    logger.info("Database table initialized")

    yield

    logger.info("Shutting down...")
    await storage.close()
    logger.info("Database connection closed")


def create_app(storage: ApplicationStorage | None = None) -> FastAPI:
    """Build the FastAPI application around a storage handle."""
    app = FastAPI(
        title=settings.app_name,
        description="Membership application intake and review",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.storage = storage or ApplicationStorage.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(IntakeError, intake_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )

    app.include_router(applications_router)
    app.include_router(reports_router)

    return app


app = create_app()
