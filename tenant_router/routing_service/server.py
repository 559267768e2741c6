"""Tenant router service entry point."""

from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.routing import Route

from tenant_router.routing_service.handlers import (
    admin_handler,
    health_handler,
    home_handler,
    tenant_page_handler,
)
from tenant_router.routing_service.middleware import SubdomainRoutingMiddleware
from tenant_router.routing_service.observer import RoutingObserver
from tenant_router.shared.config import get_settings
from tenant_router.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: Starlette):
    """Manage application lifecycle (startup/shutdown)."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting Tenant Router")
    logger.info(f"Root domain: {settings.root_domain}")

    yield

    logger.info("Tenant Router stopped")


def create_app(
    root_domain: str | None = None,
    observer: RoutingObserver | None = None,
    debug: bool | None = None,
) -> Starlette:
    """Create and configure the tenant router application."""
    app = Starlette(
        debug=False,
        routes=[
            Route("/", home_handler),
            Route("/admin", admin_handler),
            Route("/s/{subdomain}", tenant_page_handler),
            Route("/api/health", health_handler),
        ],
        middleware=[
            Middleware(
                SubdomainRoutingMiddleware,
                root_domain=root_domain,
                observer=observer,
                debug=debug,
            ),
        ],
        lifespan=lifespan,
    )

    return app


app = create_app()
