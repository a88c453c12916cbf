"""Custom exceptions for the application."""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class IntakeError(Exception):
    """Base exception for intake errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(IntakeError):
    """Raised when a submission is missing required fields."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, missing_fields: list[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.missing_fields)}"
        )


class NotFoundError(IntakeError):
    """Raised when an application id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, application_id: int):
        self.application_id = application_id
        super().__init__("Application not found")


class StorageError(IntakeError):
    """Raised when the database fails to serve an operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Failed to {operation}")


def error_response(status_code: int, message: str) -> JSONResponse:
    """Return the JSON error body used by every endpoint."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def intake_exception_handler(request: Request, exc: IntakeError) -> JSONResponse:
    """Convert IntakeError to JSON response."""
    return error_response(exc.status_code, exc.message)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable bodies and path params as 400 instead of 422."""
    errors = exc.errors()
    if any(
        err.get("type") == "missing" and tuple(err.get("loc", ())) == ("body",)
        for err in errors
    ):
        return error_response(
            status.HTTP_400_BAD_REQUEST, "Request body is required"
        )

    missing = [
        str(err["loc"][-1])
        for err in errors
        if err.get("type") == "missing" and err.get("loc")
    ]
    if missing:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            f"Missing required fields: {', '.join(missing)}",
        )

    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    detail = first.get("msg", "Invalid request")
    message = f"Invalid request: {location}: {detail}" if location else detail
    return error_response(status.HTTP_400_BAD_REQUEST, message)
