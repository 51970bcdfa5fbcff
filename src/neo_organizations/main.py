"""Neo Organizations API main entry point."""

import logging

import uvicorn

from .config.logging_config import setup_logging
from .config.settings import get_settings

settings = get_settings()

# Configure logging before the application is built
setup_logging(settings)

from .app import create_app  # noqa: E402

logger = logging.getLogger(__name__)

# Create the FastAPI application
app = create_app(settings)


def main() -> None:
    """Run the application."""
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "neo_organizations.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=True,
    )


if __name__ == "__main__":
    main()
