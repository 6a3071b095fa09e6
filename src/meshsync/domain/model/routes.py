"""Desired-state route model.

These types describe what the caller wants a virtual router to serve. Backend
virtual nodes are referenced symbolically (namespace + name); the spec builder
resolves them into remote names.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DurationUnit, RouteKind


@dataclass(slots=True, frozen=True, kw_only=True)
class Duration:
    unit: DurationUnit
    value: int


@dataclass(slots=True, frozen=True, kw_only=True)
class VirtualNodeReference:
    """Symbolic backend identity. ``namespace`` defaults to the router's namespace."""

    name: str
    namespace: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class WeightedTarget:
    """Backend target; exactly one of ``virtual_node_ref`` / ``virtual_node_arn`` is set."""

    weight: int
    virtual_node_ref: VirtualNodeReference | None = None
    virtual_node_arn: str | None = None
    port: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RouteAction:
    weighted_targets: tuple[WeightedTarget, ...] = ()


@dataclass(slots=True, frozen=True, kw_only=True)
class MatchRange:
    start: int
    end: int


@dataclass(slots=True, frozen=True, kw_only=True)
class HeaderMatchMethod:
    """Value matcher shared by HTTP headers and gRPC metadata.

    At most one field may be set.
    """

    exact: str | None = None
    prefix: str | None = None
    suffix: str | None = None
    regex: str | None = None
    range: MatchRange | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPHeaderMatch:
    name: str
    match: HeaderMatchMethod | None = None
    invert: bool | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPPathMatch:
    exact: str | None = None
    regex: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class QueryParameterMatch:
    exact: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPQueryParameter:
    name: str
    match: QueryParameterMatch | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPRouteMatch:
    prefix: str | None = None
    path: HTTPPathMatch | None = None
    method: str | None = None
    scheme: str | None = None
    headers: tuple[HTTPHeaderMatch, ...] | None = None
    query_parameters: tuple[HTTPQueryParameter, ...] | None = None
    port: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPRetryPolicy:
    max_retries: int
    per_retry_timeout: Duration
    http_retry_events: tuple[str, ...] | None = None
    tcp_retry_events: tuple[str, ...] | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPTimeout:
    per_request: Duration | None = None
    idle: Duration | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class HTTPRoute:
    """HTTP or HTTP/2 route body; the variant is decided by the field it sits in."""

    match: HTTPRouteMatch
    action: RouteAction
    retry_policy: HTTPRetryPolicy | None = None
    timeout: HTTPTimeout | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class TCPRouteMatch:
    port: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class TCPTimeout:
    idle: Duration | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class TCPRoute:
    action: RouteAction
    match: TCPRouteMatch | None = None
    timeout: TCPTimeout | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GRPCRouteMetadata:
    name: str
    match: HeaderMatchMethod | None = None
    invert: bool | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GRPCRouteMatch:
    service_name: str | None = None
    method_name: str | None = None
    metadata: tuple[GRPCRouteMetadata, ...] | None = None
    port: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GRPCRetryPolicy:
    max_retries: int
    per_retry_timeout: Duration
    grpc_retry_events: tuple[str, ...] | None = None
    http_retry_events: tuple[str, ...] | None = None
    tcp_retry_events: tuple[str, ...] | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class GRPCRoute:
    match: GRPCRouteMatch
    action: RouteAction
    retry_policy: GRPCRetryPolicy | None = None
    timeout: HTTPTimeout | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class Route:
    """One desired route of a virtual router, identified by ``name``."""

    name: str
    priority: int | None = None
    http_route: HTTPRoute | None = None
    http2_route: HTTPRoute | None = None
    grpc_route: GRPCRoute | None = None
    tcp_route: TCPRoute | None = None

    @property
    def kinds(self) -> tuple[RouteKind, ...]:
        """Route variants that are set, in declaration order."""

        present: list[RouteKind] = []
        if self.http_route is not None:
            present.append(RouteKind.HTTP)
        if self.http2_route is not None:
            present.append(RouteKind.HTTP2)
        if self.grpc_route is not None:
            present.append(RouteKind.GRPC)
        if self.tcp_route is not None:
            present.append(RouteKind.TCP)
        return tuple(present)

    @property
    def match_ports(self) -> tuple[tuple[RouteKind, int], ...]:
        """Listener ports the route's matches are pinned to, keyed by variant."""

        ports: list[tuple[RouteKind, int]] = []
        if self.tcp_route is not None and self.tcp_route.match is not None:
            if self.tcp_route.match.port is not None:
                ports.append((RouteKind.TCP, self.tcp_route.match.port))
        if self.grpc_route is not None and self.grpc_route.match.port is not None:
            ports.append((RouteKind.GRPC, self.grpc_route.match.port))
        if self.http2_route is not None and self.http2_route.match.port is not None:
            ports.append((RouteKind.HTTP2, self.http2_route.match.port))
        if self.http_route is not None and self.http_route.match.port is not None:
            ports.append((RouteKind.HTTP, self.http_route.match.port))
        return tuple(ports)
