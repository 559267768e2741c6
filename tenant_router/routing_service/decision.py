"""Routing decisions for tenant subdomains."""

from tenant_router.routing_service.extractor import extract_from_request
from tenant_router.routing_service.observer import RoutingObserver, RoutingTrace
from tenant_router.shared.models import (
    PassThrough,
    Redirect,
    RequestDescriptor,
    Rewrite,
    RoutingDecision,
)

ADMIN_PREFIX = "/admin"
TENANT_PAGE_PREFIX = "/s/"


def route(pathname: str, subdomain: str | None) -> RoutingDecision:
    """Classify a request path on a (possibly missing) tenant subdomain."""
    if not subdomain:
        return PassThrough()

    # tenants never reach the admin area
    if pathname.startswith(ADMIN_PREFIX):
        return Redirect(path="/")

    if pathname == "/":
        return Rewrite(path=f"{TENANT_PAGE_PREFIX}{subdomain}")

    return PassThrough()


def resolve(
    request: RequestDescriptor,
    root_domain: str,
    observer: RoutingObserver | None = None,
) -> tuple[str | None, RoutingDecision]:
    """
    Extract the subdomain and route a single request.

    Args:
        request: Request metadata
        root_domain: Configured root domain
        observer: Optional hook receiving one trace per call

    Returns:
        The detected subdomain (or None) and the routing decision
    """
    subdomain = extract_from_request(request, root_domain)
    decision = route(request.path, subdomain)

    if observer is not None:
        observer(
            RoutingTrace(
                host=request.host_header,
                pathname=request.path,
                subdomain=subdomain,
                root_domain=root_domain,
                decision=decision,
            )
        )

    return subdomain, decision
