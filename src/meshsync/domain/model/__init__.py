"""Public domain model surface."""

from __future__ import annotations

from meshsync.domain.model.enums import DurationUnit, PortProtocol, RouteKind
from meshsync.domain.model.remote import (
    GRPCRouteSpec,
    HTTPRouteSpec,
    ResourceMetadata,
    RouteActionSpec,
    RouteRecord,
    RouteRef,
    RouteSpec,
    TCPRouteSpec,
    WeightedTargetSpec,
)
from meshsync.domain.model.router import (
    Listener,
    ListenerProtocols,
    MeshIdentity,
    VirtualNodeKey,
    VirtualNodeTable,
    VirtualRouterIdentity,
    listener_protocols,
)
from meshsync.domain.model.routes import (
    Duration,
    GRPCRetryPolicy,
    GRPCRoute,
    GRPCRouteMatch,
    GRPCRouteMetadata,
    HeaderMatchMethod,
    HTTPHeaderMatch,
    HTTPPathMatch,
    HTTPQueryParameter,
    HTTPRetryPolicy,
    HTTPRoute,
    HTTPRouteMatch,
    HTTPTimeout,
    MatchRange,
    QueryParameterMatch,
    Route,
    RouteAction,
    TCPRoute,
    TCPRouteMatch,
    TCPTimeout,
    VirtualNodeReference,
    WeightedTarget,
)

__all__ = [
    "Duration",
    "DurationUnit",
    "GRPCRetryPolicy",
    "GRPCRoute",
    "GRPCRouteMatch",
    "GRPCRouteMetadata",
    "GRPCRouteSpec",
    "HTTPHeaderMatch",
    "HTTPPathMatch",
    "HTTPQueryParameter",
    "HTTPRetryPolicy",
    "HTTPRoute",
    "HTTPRouteMatch",
    "HTTPRouteSpec",
    "HTTPTimeout",
    "HeaderMatchMethod",
    "Listener",
    "ListenerProtocols",
    "MatchRange",
    "MeshIdentity",
    "PortProtocol",
    "QueryParameterMatch",
    "ResourceMetadata",
    "Route",
    "RouteAction",
    "RouteActionSpec",
    "RouteKind",
    "RouteRecord",
    "RouteRef",
    "RouteSpec",
    "TCPRoute",
    "TCPRouteMatch",
    "TCPRouteSpec",
    "TCPTimeout",
    "VirtualNodeKey",
    "VirtualNodeReference",
    "VirtualNodeTable",
    "VirtualRouterIdentity",
    "WeightedTarget",
    "WeightedTargetSpec",
    "listener_protocols",
]
