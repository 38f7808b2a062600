# =============================================================================
# static_site/routers/pages.py - Page Endpoints
# =============================================================================
# Each page ignores the request and renders one fixed template.
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from static_site.templating import (
    HOME_PAGE,
    JACKET_PAGE,
    LEARN_MORE_PAGE,
    html_template,
)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home():
    """Landing page."""
    return html_template(HOME_PAGE)


@router.get("/learn", response_class=HTMLResponse)
async def learn_more():
    return html_template(LEARN_MORE_PAGE)


@router.get("/jacket", response_class=HTMLResponse)
async def jacket():
    return html_template(JACKET_PAGE)
