# =============================================================================
# static_site/templating.py - Page Templates
# =============================================================================
# Template handles for every page and the single function that turns a
# renderable into an HTML response.
#
# Templates live in static_site/templates/ and take no context: each page
# renders the same HTML on every request.
# =============================================================================

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from static_site.exceptions import TemplateRenderError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class Renderable(Protocol):
    """Anything that can produce an HTML string."""

    path: str

    def render(self) -> str: ...


@dataclass(frozen=True)
class PageTemplate:
    """A template file rendered with no parameters."""

    path: str

    def render(self) -> str:
        return templates.get_template(self.path).render()


HOME_PAGE = PageTemplate("pages/home.html")
LEARN_MORE_PAGE = PageTemplate("pages/learn-more.html")
JACKET_PAGE = PageTemplate("pages/jacket.html")

PAGES = (HOME_PAGE, LEARN_MORE_PAGE, JACKET_PAGE)


def html_template(template: Renderable) -> HTMLResponse:
    """
    Render a template into an HTML response.

    Args:
        template: Any value with a render() method returning a string

    Returns:
        HTMLResponse with status 200

    Raises:
        TemplateRenderError: If the template is missing or fails to render
    """
    try:
        html = template.render()
    except (TemplateError, UnicodeDecodeError) as e:
        logger.error(f"Failed to render {template.path}: {e}")
        raise TemplateRenderError(template.path, str(e)) from e

    return HTMLResponse(html)


def check_templates() -> None:
    """
    Render every page once.

    Called before the server binds so a broken template stops startup
    instead of turning into 500s.

    Raises:
        TemplateRenderError: On the first page that fails
    """
    for page in PAGES:
        html_template(page)
        logger.debug(f"Template {page.path} OK")
