# =============================================================================
# static_site/routers/api.py - API Endpoints
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HELLO_MESSAGE = "Hello!"


@router.get("/hello", response_class=PlainTextResponse)
async def say_hello():
    """
    Hello endpoint.

    Always returns the same text; there is no failure mode.
    """
    return PlainTextResponse(HELLO_MESSAGE)
