"""Subdomain extraction over an ordered table of host rules."""

from collections.abc import Sequence

from tenant_router.routing_service.rules.base_rule import HostRule
from tenant_router.routing_service.rules.custom_domain import CustomDomainRule
from tenant_router.routing_service.rules.local import LocalDevelopmentRule
from tenant_router.routing_service.rules.vercel import PreviewDeploymentRule, ProjectWildcardRule
from tenant_router.shared.models import RequestDescriptor

# Priority order. The first rule that applies decides, even when it finds nothing.
DEFAULT_RULES: tuple[HostRule, ...] = (
    LocalDevelopmentRule(),
    PreviewDeploymentRule(),
    ProjectWildcardRule(),
    CustomDomainRule(),
)


def match_rule(
    request: RequestDescriptor,
    root_domain: str,
    rules: Sequence[HostRule] = DEFAULT_RULES,
) -> HostRule | None:
    """Return the first rule that owns the request."""
    for rule in rules:
        if rule.applies(request, root_domain):
            return rule
    return None


def extract_from_request(
    request: RequestDescriptor,
    root_domain: str,
    rules: Sequence[HostRule] = DEFAULT_RULES,
) -> str | None:
    rule = match_rule(request, root_domain, rules)
    if rule is None:
        return None
    return rule.extract(request, root_domain)


def extract_subdomain(url: str, host_header: str, root_domain: str) -> str | None:
    """
    Extract the tenant subdomain from a request.

    Args:
        url: Raw request URL, only used to detect local development
        host_header: Host header value, possibly with a port
        root_domain: Configured root domain, possibly with a port

    Returns:
        The subdomain, or None when the host does not name one
    """
    request = RequestDescriptor(url=url, host_header=host_header or "")
    return extract_from_request(request, root_domain)
