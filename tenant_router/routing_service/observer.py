"""Optional observability hook for routing decisions."""

from typing import Protocol

from pydantic import BaseModel

from tenant_router.shared.logging import get_logger
from tenant_router.shared.models import RoutingDecision

logger = get_logger(__name__)


class RoutingTrace(BaseModel):
    """Structured fields describing one routing decision."""

    host: str
    pathname: str
    subdomain: str | None
    root_domain: str
    decision: RoutingDecision


class RoutingObserver(Protocol):
    def __call__(self, trace: RoutingTrace) -> None: ...


class LoggingObserver:
    """Writes each trace as a debug record with the fields in ``extra``."""

    def __init__(self, log=None):
        self._logger = log or logger

    def __call__(self, trace: RoutingTrace) -> None:
        self._logger.debug(
            f"Routing {trace.host}{trace.pathname} -> {trace.decision.kind} (subdomain={trace.subdomain})",
            extra={
                "routing_host": trace.host,
                "routing_path": trace.pathname,
                "routing_subdomain": trace.subdomain,
                "routing_root_domain": trace.root_domain,
                "routing_decision": trace.decision.kind,
            },
        )
