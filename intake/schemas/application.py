"""Schemas for membership application requests and responses."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApplicationStatus(str, Enum):
    """Lifecycle state of an application."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "city",
    "motivation",
    "contribution",
    "availability",
    "membership_type",
)


class CamelModel(BaseModel):
    """Base model exposing camelCase JSON keys and accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApplicationCreate(CamelModel):
    """Membership application submission."""

    name: str = Field(..., description="Applicant full name")
    email: str = Field(..., description="Contact email")
    phone: str = Field(..., description="Contact phone number")
    city: str = Field(..., description="City of residence")
    motivation: str = Field(..., description="Why the applicant wants to join")
    contribution: str = Field(..., description="What the applicant can bring")
    availability: str = Field(..., description="Time the applicant can give")
    skills: list[Any] | str | None = Field(
        default=None,
        description="Skills as a list, a JSON-encoded list or a comma-separated string",
    )
    other_details: str | None = Field(default=None, description="Free-form notes")
    membership_type: str = Field(..., description="Requested membership type")
    newsletter_opt_in: bool | None = Field(
        default=False, description="Subscribe to the newsletter"
    )


class ApplicationRead(CamelModel):
    """Stored membership application."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    city: str
    motivation: str
    contribution: str
    availability: str
    skills: list[str] = Field(default_factory=list)
    other_details: str | None = None
    membership_type: str
    newsletter_opt_in: bool = False
    status: ApplicationStatus
    submitted_at: str
    created_at: datetime


class ApplicationCreated(BaseModel):
    """Response for a successful submission."""

    message: str
    id: int


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class StatisticsResponse(BaseModel):
    """Application counts; a key is absent when its count could not be read."""

    total: int | None = None
    pending: int | None = None
    approved: int | None = None
    rejected: int | None = None


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str
    message: str
