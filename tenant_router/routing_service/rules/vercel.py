"""Hosts under vercel.app: preview deployments and project wildcards."""

import re

from tenant_router.routing_service.rules.base_rule import HostRule
from tenant_router.shared.models import RequestDescriptor, strip_port

VERCEL_SUFFIX = ".vercel.app"
PREVIEW_SEPARATOR = "---"

_WILDCARD_PATTERN = re.compile(r"^([^.]+)\.(.+)\.vercel\.app$")


class PreviewDeploymentRule(HostRule):
    """tenant---branch-name.vercel.app"""

    name = "vercel-preview"

    def applies(self, request: RequestDescriptor, root_domain: str) -> bool:
        hostname = request.hostname
        return PREVIEW_SEPARATOR in hostname and hostname.endswith(VERCEL_SUFFIX)

    def extract(self, request: RequestDescriptor, root_domain: str) -> str | None:
        return request.hostname.split(PREVIEW_SEPARATOR, 1)[0]


class ProjectWildcardRule(HostRule):
    """
    subdomain.project-name.vercel.app

    Owns every remaining vercel.app host. Only hosts under the configured
    project yield a subdomain; anything else yields None.
    """

    name = "vercel-wildcard"

    def applies(self, request: RequestDescriptor, root_domain: str) -> bool:
        return request.hostname.endswith(VERCEL_SUFFIX)

    def extract(self, request: RequestDescriptor, root_domain: str) -> str | None:
        match = _WILDCARD_PATTERN.match(request.hostname)
        if match is None:
            return None

        subdomain, project = match.groups()
        if f"{project}{VERCEL_SUFFIX}" == strip_port(root_domain):
            return subdomain

        return None
