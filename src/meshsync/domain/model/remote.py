"""Remote (control-plane side) route shapes.

Match, retry and timeout blocks are shared with the desired model because they
carry no references. Only actions differ: remote weighted targets name the
virtual node by its remote name instead of a symbolic reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from .routes import (
        GRPCRetryPolicy,
        GRPCRouteMatch,
        HTTPRetryPolicy,
        HTTPRouteMatch,
        HTTPTimeout,
        TCPRouteMatch,
        TCPTimeout,
    )


@dataclass(slots=True, frozen=True, kw_only=True)
class WeightedTargetSpec:
    virtual_node: str
    weight: int
    port: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RouteActionSpec:
    weighted_targets: tuple[WeightedTargetSpec, ...] | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPRouteSpec:
    match: HTTPRouteMatch
    action: RouteActionSpec
    retry_policy: HTTPRetryPolicy | None = None
    timeout: HTTPTimeout | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GRPCRouteSpec:
    match: GRPCRouteMatch
    action: RouteActionSpec
    retry_policy: GRPCRetryPolicy | None = None
    timeout: HTTPTimeout | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class TCPRouteSpec:
    action: RouteActionSpec
    match: TCPRouteMatch | None = None
    timeout: TCPTimeout | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RouteSpec:
    priority: int | None = None
    http_route: HTTPRouteSpec | None = None
    http2_route: HTTPRouteSpec | None = None
    grpc_route: GRPCRouteSpec | None = None
    tcp_route: TCPRouteSpec | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RouteRef:
    """Lightweight remote identity returned by route listings."""

    mesh_name: str
    virtual_router_name: str
    route_name: str
    mesh_owner: str | None = None
    resource_owner: str | None = None
    arn: str | None = None
    version: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class ResourceMetadata:
    arn: str | None = None
    mesh_owner: str | None = None
    resource_owner: str | None = None
    uid: str | None = None
    version: int | None = None
    created_at: datetime | None = None
    last_updated_at: datetime | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RouteRecord:
    """Full remote route as returned by describe/create/update calls."""

    mesh_name: str
    virtual_router_name: str
    route_name: str
    spec: RouteSpec
    metadata: ResourceMetadata
    status: str | None = None

    @property
    def ref(self) -> RouteRef:
        return RouteRef(
            mesh_name=self.mesh_name,
            virtual_router_name=self.virtual_router_name,
            route_name=self.route_name,
            mesh_owner=self.metadata.mesh_owner,
            resource_owner=self.metadata.resource_owner,
            arn=self.metadata.arn,
            version=self.metadata.version,
        )
