# =============================================================================
# static_site/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized error handling for the site.
# Request-time errors become responses; startup errors stop the process.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException


class StaticSiteException(Exception):
    """
    Base exception for the static site.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "STATIC_SITE_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict for logging."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Rendering
# =============================================================================

class TemplateRenderError(StaticSiteException):
    """Raised when a page template cannot be loaded or rendered."""

    def __init__(self, template: str, error: str):
        super().__init__(
            message=f"Failed to render template. Error: {error}",
            code="TEMPLATE_RENDER_ERROR",
            status_code=500,
            details={"template": template, "error": error}
        )


# =============================================================================
# Startup
# =============================================================================

class ConfigurationError(StaticSiteException):
    """Raised when the process cannot start with the given environment."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            status_code=500,
            details=details
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def template_render_exception_handler(
    request: Request,
    exc: TemplateRenderError
) -> Response:
    """Render failures are reported to the client as plain text."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def method_not_allowed_handler(
    request: Request,
    exc: StarletteHTTPException
) -> Response:
    """
    Answer a wrong method on a known path with the default 404.

    Routes are matched on method and path together, so GET-only paths
    look the same as unknown paths to any other method.
    """
    return await http_exception_handler(request, StarletteHTTPException(status_code=404))
