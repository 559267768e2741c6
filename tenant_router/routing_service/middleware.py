"""Middleware for tenant subdomain routing."""

import re

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse
from starlette.types import ASGIApp

from tenant_router.shared.config import get_settings
from tenant_router.routing_service.decision import resolve
from tenant_router.routing_service.observer import LoggingObserver, RoutingObserver
from tenant_router.shared.logging import get_logger
from tenant_router.shared.models import Redirect, RequestDescriptor, Rewrite

logger = get_logger(__name__)

# API routes, framework internals and root-level static files (/favicon.ico)
EXCLUDED_PATH_PATTERN = re.compile(r"^/(?:api|_next|_vercel|[\w-]+\.\w+)")


def is_excluded_path(path: str) -> bool:
    """Return True for paths that bypass subdomain routing."""
    return EXCLUDED_PATH_PATTERN.match(path) is not None


class SubdomainRoutingMiddleware(BaseHTTPMiddleware):
    """Extracts the tenant subdomain from the Host header and rewrites or redirects the request."""

    def __init__(
        self,
        app: ASGIApp,
        root_domain: str | None = None,
        observer: RoutingObserver | None = None,
        debug: bool | None = None,
    ):
        super().__init__(app)
        settings = get_settings()
        self.__root_domain = root_domain or settings.root_domain

        if debug is None:
            debug = settings.debug_routing
        if observer is None and debug:
            observer = LoggingObserver()
        self.__observer = observer

    async def dispatch(self, request: Request, call_next):
        """Route the request according to its subdomain."""
        request.state.subdomain = None

        path = request.url.path
        if is_excluded_path(path):
            return await call_next(request)

        descriptor = RequestDescriptor(
            url=str(request.url),
            host_header=request.headers.get("host", ""),
            path=path,
        )
        subdomain, decision = resolve(descriptor, self.__root_domain, self.__observer)

        # Attach subdomain to request state for handlers to use
        request.state.subdomain = subdomain

        if isinstance(decision, Redirect):
            target = request.url.replace(path=decision.path, query="", fragment="")
            logger.info(f"Redirecting {descriptor.host_header}{path} to {decision.path}")
            return RedirectResponse(url=str(target))

        if isinstance(decision, Rewrite):
            logger.debug(f"Rewriting {path} to {decision.path} for subdomain {subdomain}")
            request.scope["path"] = decision.path
            request.scope["raw_path"] = decision.path.encode()

        response = await call_next(request)
        return response
