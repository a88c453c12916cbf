"""API routes for statistics and service health."""

from fastapi import APIRouter, Depends

from intake.core.storage import ApplicationStorage, get_storage
from intake.schemas.application import HealthResponse, StatisticsResponse

router = APIRouter(prefix="/api", tags=["reports"])


@router.get(
    "/statistics",
    response_model=StatisticsResponse,
    response_model_exclude_none=True,
)
async def get_statistics(
    storage: ApplicationStorage = Depends(get_storage),
):
    """Count applications in total and per status."""
    return StatisticsResponse(**await storage.count_by_status())


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="ok", message="Server is running")
