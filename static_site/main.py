# =============================================================================
# static_site/main.py - FastAPI Application
# =============================================================================
# Builds the application: page routes, the /api router, and the /assets
# file mount, plus the exception handlers that shape error responses.
#
# Usage:
#   PORT=8080 static-web-server
#   uvicorn static_site.main:app --port 8080
# =============================================================================

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from static_site import __version__
from static_site.exceptions import (
    TemplateRenderError,
    method_not_allowed_handler,
    template_render_exception_handler,
)
from static_site.routers import api, pages

logger = logging.getLogger(__name__)


def create_app(assets_dir: str | Path = "assets") -> FastAPI:
    """
    Build the application.

    Args:
        assets_dir: Directory served under /assets. A relative path is
            resolved against the working directory once, when the app is built.

    Returns:
        FastAPI: The configured application
    """
    logger.info("initializing router and assets...")

    app = FastAPI(
        title="Static Web Server",
        version=__version__,
        # Only the routes below exist
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(TemplateRenderError, template_render_exception_handler)
    app.add_exception_handler(405, method_not_allowed_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(pages.router)

    app.include_router(
        api.router,
        prefix="/api",
    )

    # =========================================================================
    # Assets
    # =========================================================================

    # The directory is not required to exist when the app is built
    app.mount(
        "/assets",
        StaticFiles(directory=str(Path(assets_dir).resolve()), check_dir=False),
        name="assets",
    )

    return app


app = create_app()
