# =============================================================================
# static_site/routers/ - Route Definitions
# =============================================================================
# - pages.py: HTML pages rendered from templates
# - api.py: Plain-text API endpoints
#
# Each router is mounted in main.py; the API router under /api.
# =============================================================================

from . import api
from . import pages

__all__ = [
    "api",
    "pages",
]
