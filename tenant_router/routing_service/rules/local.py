"""Local development hosts (tenant.localhost, 127.0.0.1)."""

import re

from tenant_router.routing_service.rules.base_rule import HostRule
from tenant_router.shared.models import RequestDescriptor

LOCAL_MARKERS = ("localhost", "127.0.0.1")

_FULL_URL_PATTERN = re.compile(r"http://([^.]+)\.localhost")


class LocalDevelopmentRule(HostRule):
    """Detects local development by looking at the raw request URL."""

    name = "local"

    def applies(self, request: RequestDescriptor, root_domain: str) -> bool:
        return any(marker in request.url for marker in LOCAL_MARKERS)

    def extract(self, request: RequestDescriptor, root_domain: str) -> str | None:
        match = _FULL_URL_PATTERN.search(request.url)
        if match:
            return match.group(1)

        # fallback: host header
        hostname = request.hostname
        if ".localhost" in hostname:
            return hostname.split(".")[0]

        return None
