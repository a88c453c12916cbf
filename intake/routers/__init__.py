"""API routers."""

from intake.routers.applications import router as applications_router
from intake.routers.reports import router as reports_router

__all__ = ["applications_router", "reports_router"]
