# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_pages.py: HTML page routes and render failures
# - test_api.py: /api endpoints
# - test_assets.py: /assets file serving
# - test_routing.py: Unknown paths and methods
# - test_config.py: Settings loading
# - test_logging_config.py: LOG_FILTER parsing
# - test_server.py: Startup sequence
#
# Run tests with: pytest
# =============================================================================
