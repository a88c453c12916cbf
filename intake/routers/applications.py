"""API routes for membership applications."""

import logging

from fastapi import APIRouter, Depends, status

from intake.core.storage import ApplicationStorage, get_storage
from intake.schemas.application import (
    ApplicationCreate,
    ApplicationCreated,
    ApplicationRead,
    ApplicationStatus,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.post(
    "",
    response_model=ApplicationCreated,
    status_code=status.HTTP_201_CREATED,
)
async def create_application(
    request: ApplicationCreate,
    storage: ApplicationStorage = Depends(get_storage),
):
    """Submit a new membership application."""
    application_id = await storage.create_application(request)
    return ApplicationCreated(
        message="Application created successfully", id=application_id
    )


@router.get("", response_model=list[ApplicationRead])
async def list_applications(
    storage: ApplicationStorage = Depends(get_storage),
):
    """List all applications, newest first."""
    return await storage.list_applications()


@router.get("/{application_id}", response_model=ApplicationRead)
async def get_application(
    application_id: int,
    storage: ApplicationStorage = Depends(get_storage),
):
    """Get a single application by ID."""
    return await storage.get_application(application_id)


@router.put("/{application_id}/approve", response_model=MessageResponse)
async def approve_application(
    application_id: int,
    storage: ApplicationStorage = Depends(get_storage),
):
    """Approve an application."""
    await storage.set_status(application_id, ApplicationStatus.APPROVED)
    return MessageResponse(message="Application approved successfully")


@router.put("/{application_id}/reject", response_model=MessageResponse)
async def reject_application(
    application_id: int,
    storage: ApplicationStorage = Depends(get_storage),
):
    """Reject an application."""
    await storage.set_status(application_id, ApplicationStatus.REJECTED)
    return MessageResponse(message="Application rejected successfully")
