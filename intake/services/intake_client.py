"""Async client for the membership intake API."""

import logging
from typing import Any

import httpx

from intake.schemas.application import ApplicationCreate

logger = logging.getLogger(__name__)


class IntakeAPIError(Exception):
    """Intake API error."""

    def __init__(
        self, status_code: int, message: str, response_data: dict | None = None
    ):
        self.status_code = status_code
        self.message = message
        self.response_data = response_data or {}
        super().__init__(message)


class IntakeClient:
    """Membership intake API client.

    Every call surfaces failures immediately: there is no retry, caching
    or backoff.
    """

    DEFAULT_BASE_URL = "http://localhost:3000/api"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Send one request and return the decoded JSON body."""
        try:
            response = await self.client.request(method, endpoint, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Network error on {method} {endpoint}: {e!s}")
            raise IntakeAPIError(503, f"Network error: {e!s}") from e

        if response.is_error:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {"error": response.text[:500]}
            if not isinstance(error_data, dict):
                error_data = {"error": str(error_data)}

            message = error_data.get("error") or f"HTTP error {response.status_code}"
            logger.error(
                f"Intake API error: {response.status_code} - {message}, "
                f"Endpoint: {endpoint}, Method: {method}"
            )
            raise IntakeAPIError(response.status_code, message, error_data)

        try:
            return response.json()
        except ValueError as e:
            raise IntakeAPIError(
                response.status_code,
                f"Invalid JSON response: {e!s}",
                {"response_text": response.text[:500]},
            ) from e

    async def create_application(
        self, application: ApplicationCreate | dict[str, Any]
    ) -> dict:
        """Submit a new application; returns ``{"message", "id"}``."""
        if isinstance(application, ApplicationCreate):
            payload = application.model_dump(by_alias=True, exclude_none=True)
        else:
            payload = application
        return await self._request("POST", "/applications", json=payload)

    async def list_applications(self) -> list[dict]:
        return await self._request("GET", "/applications")

    async def get_application(self, application_id: int) -> dict:
        return await self._request("GET", f"/applications/{application_id}")

    async def approve_application(self, application_id: int) -> dict:
        return await self._request("PUT", f"/applications/{application_id}/approve")

    async def reject_application(self, application_id: int) -> dict:
        return await self._request("PUT", f"/applications/{application_id}/reject")

    async def get_statistics(self) -> dict:
        return await self._request("GET", "/statistics")

    async def health(self) -> dict:
        return await self._request("GET", "/health")

    async def close(self):
        await self.client.aclose()

