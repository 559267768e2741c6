"""Subdomains of the configured root domain."""

from tenant_router.routing_service.rules.base_rule import HostRule
from tenant_router.shared.models import RequestDescriptor, strip_port


class CustomDomainRule(HostRule):
    """Catch-all rule: <subdomain>.<root domain>, excluding the apex and www."""

    name = "custom-domain"

    def applies(self, request: RequestDescriptor, root_domain: str) -> bool:
        return True

    def extract(self, request: RequestDescriptor, root_domain: str) -> str | None:
        hostname = request.hostname
        root = strip_port(root_domain)
        suffix = f".{root}"

        if hostname in (root, f"www.{root}"):
            return None

        if hostname.endswith(suffix):
            return hostname[: -len(suffix)]

        return None
