"""Run the intake API with uvicorn."""

import logging

import uvicorn

from intake.core.config import settings
from intake.main import app

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the intake app on the configured host and port."""
    logger.info(
        f"Server is running on http://localhost:{settings.port}, "
        f"API endpoints available at http://localhost:{settings.port}/api"
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
