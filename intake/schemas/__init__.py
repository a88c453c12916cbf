"""Pydantic schemas for request/response validation."""

from intake.schemas.application import (
    ApplicationCreate,
    ApplicationCreated,
    ApplicationRead,
    ApplicationStatus,
    HealthResponse,
    MessageResponse,
    StatisticsResponse,
)

__all__ = [
    "ApplicationCreate",
    "ApplicationCreated",
    "ApplicationRead",
    "ApplicationStatus",
    "HealthResponse",
    "MessageResponse",
    "StatisticsResponse",
]
