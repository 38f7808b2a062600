# =============================================================================
# static_site/server.py - Process Entry Point
# =============================================================================
# Startup sequence:
#   1. Configure logging from LOG_FILTER
#   2. Load settings, PORT is required
#   3. Render every template once
#   4. Build the app and serve it with uvicorn on HOST:PORT
#
# Any failure before step 4 exits with status 1. uvicorn exits with status 1
# by itself if it cannot bind.
#
# Usage:
#   PORT=8080 static-web-server
#   PORT=8080 python -m static_site
# =============================================================================

import logging
import sys

import uvicorn
from pydantic import ValidationError

from static_site.config import Settings, get_logging_settings, get_settings
from static_site.exceptions import ConfigurationError, StaticSiteException
from static_site.logging_config import configure_logging
from static_site.main import create_app
from static_site.templating import check_templates

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationError: If PORT is unset or not an integer in 0..65535
    """
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(
            "PORT must be set to an integer between 0 and 65535",
            details={"errors": [error["msg"] for error in e.errors()]}
        ) from e


def serve(settings: Settings) -> None:
    """Check templates, build the app and run it until the process is stopped."""
    check_templates()
    app = create_app(settings.ASSETS_DIR)

    logger.info(f"router initialized, now listening on port {settings.PORT}")

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        # Keep the logging set up by configure_logging()
        log_config=None,
    )


def main() -> None:
    """Start the server, or exit with status 1 if startup fails."""
    try:
        configure_logging(get_logging_settings().LOG_FILTER)
        serve(load_settings())
    except StaticSiteException as e:
        logger.critical(f"Startup failed: {e.message}")
        if e.details:
            logger.critical(f"Details: {e.details}")
        sys.exit(1)


if __name__ == "__main__":
    main()
