"""Data models for the tenant router."""

from typing import Annotated, Literal
from pydantic import BaseModel, Field, TypeAdapter


class RequestDescriptor(BaseModel):
    """Request metadata the router needs, captured once per request."""

    url: Annotated[str, Field(description="Full request URL")] = ""
    host_header: Annotated[str, Field(description="Host header, possibly with a port")] = ""
    path: Annotated[str, Field(description="Request path")] = "/"

    @property
    def hostname(self) -> str:
        """Host header without the port suffix."""
        return strip_port(self.host_header)


class PassThrough(BaseModel):
    """Forward the request unchanged."""

    kind: Literal["pass_through"] = "pass_through"


class Redirect(BaseModel):
    """Send the client to another path on the same origin."""

    kind: Literal["redirect"] = "redirect"
    path: Annotated[str, Field(description="Absolute path to redirect to")]


class Rewrite(BaseModel):
    """Serve another path without changing the client-visible URL."""

    kind: Literal["rewrite"] = "rewrite"
    path: Annotated[str, Field(description="Absolute path to serve instead")]


RoutingDecision = Annotated[PassThrough | Redirect | Rewrite, Field(discriminator="kind")]

routing_decision_adapter = TypeAdapter(RoutingDecision)


def strip_port(host: str) -> str:
    return host.split(":")[0]
