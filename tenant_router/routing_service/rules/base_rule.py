"""Abstract base class for host classification rules."""

from abc import ABC, abstractmethod

from tenant_router.shared.models import RequestDescriptor


class HostRule(ABC):
    """One entry of the ordered host classification table."""

    name: str = "rule"

    @abstractmethod
    def applies(self, request: RequestDescriptor, root_domain: str) -> bool:
        """
        Decide whether this rule owns the request.

        Args:
            request: Request metadata
            root_domain: Configured root domain, possibly with a port

        Returns:
            True if this rule decides the subdomain, even when it finds none
        """
        pass

    @abstractmethod
    def extract(self, request: RequestDescriptor, root_domain: str) -> str | None:
        """
        Extract the subdomain from a request this rule owns.

        Args:
            request: Request metadata
            root_domain: Configured root domain, possibly with a port

        Returns:
            The subdomain, or None if the host does not name one
        """
        pass
