"""Application services."""

from intake.services.intake_client import IntakeAPIError, IntakeClient

__all__ = ["IntakeAPIError", "IntakeClient"]
