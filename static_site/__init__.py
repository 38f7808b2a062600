# =============================================================================
# static_site/ - Static Web Server Package
# =============================================================================
# This package contains the web application:
# - main.py: App factory, exception handlers, router and assets wiring
# - config.py: Environment variable loading and settings
# - templating.py: Page templates and the HTML response conversion
# - routers/: Page and API endpoint definitions
# - server.py: Process entry point (logging, settings, uvicorn)
#
# There is no business logic here. Every request is served from a fixed
# route table, a template, or the assets directory.
# =============================================================================

__version__ = "1.0.0"
