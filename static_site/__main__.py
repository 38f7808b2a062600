# =============================================================================
# static_site/__main__.py - Module Entry Point
# =============================================================================
# Usage:
#   PORT=8080 python -m static_site
# =============================================================================

from static_site.server import main

if __name__ == "__main__":
    main()
