"""Demonstration page handlers served behind the routing middleware."""

from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from tenant_router.shared.logging import get_logger

logger = get_logger(__name__)


async def home_handler(request: Request) -> Response:
    """Root domain landing page."""
    return PlainTextResponse("Root domain home")


async def admin_handler(request: Request) -> Response:
    """Admin area, only reachable on the root domain."""
    return PlainTextResponse("Admin dashboard")


async def tenant_page_handler(request: Request) -> Response:
    """
    Tenant landing page.

    Reached through the rewrite of "/" on a tenant host, or directly at /s/<subdomain>.
    """
    subdomain = request.path_params["subdomain"]
    logger.debug(f"Serving tenant page for {subdomain}")
    return PlainTextResponse(f"Tenant page: {subdomain}")


async def health_handler(request: Request) -> Response:
    """Health check; never passes through the subdomain router."""
    return JSONResponse({"status": "ok", "subdomain": request.state.subdomain})
