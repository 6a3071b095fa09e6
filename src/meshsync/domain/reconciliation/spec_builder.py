"""Build remote route specs from desired routes.

Pure functions only: the caller passes the virtual node table explicitly, so a
spec can be built (and tested) without a control-plane client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from meshsync.domain.errors import ConversionError
from meshsync.domain.model import (
    GRPCRouteSpec,
    HTTPRouteSpec,
    RouteActionSpec,
    RouteSpec,
    TCPRouteSpec,
    VirtualNodeKey,
    WeightedTargetSpec,
)

if TYPE_CHECKING:
    from meshsync.domain.model import (
        GRPCRoute,
        GRPCRouteMatch,
        HeaderMatchMethod,
        HTTPRoute,
        HTTPRouteMatch,
        Route,
        RouteAction,
        TCPRoute,
        VirtualNodeReference,
        VirtualNodeTable,
        VirtualRouterIdentity,
        WeightedTarget,
    )


def resolve_virtual_node(
    router: VirtualRouterIdentity,
    ref: VirtualNodeReference,
    virtual_nodes: VirtualNodeTable,
) -> str:
    """Return the remote name of the virtual node ``ref`` points at."""

    key = VirtualNodeKey(namespace=ref.namespace or router.namespace, name=ref.name)
    try:
        return virtual_nodes[key]
    except KeyError:
        raise ConversionError(
            f"unexpected VirtualNodeReference: {key.namespace}/{key.name}"
        ) from None


def build_route_spec(
    router: VirtualRouterIdentity,
    route: Route,
    virtual_nodes: VirtualNodeTable,
) -> RouteSpec:
    """Translate ``route`` into the control plane's route spec shape.

    Raises :class:`ConversionError` for dangling virtual node references and
    for match combinations the control plane would reject.
    """

    kinds = route.kinds
    if len(kinds) != 1:
        found = ", ".join(kinds) or "none"
        raise ConversionError(
            f"exactly one route variant must be set (found: {found})",
            route_name=route.name,
        )

    try:
        http_route = route.http_route
        http2_route = route.http2_route
        grpc_route = route.grpc_route
        tcp_route = route.tcp_route
        return RouteSpec(
            priority=route.priority,
            http_route=_http_route(router, http_route, virtual_nodes) if http_route else None,
            http2_route=_http_route(router, http2_route, virtual_nodes) if http2_route else None,
            grpc_route=_grpc_route(router, grpc_route, virtual_nodes) if grpc_route else None,
            tcp_route=_tcp_route(router, tcp_route, virtual_nodes) if tcp_route else None,
        )
    except ConversionError as exc:
        if exc.route_name is not None:
            raise
        raise ConversionError(str(exc), route_name=route.name) from exc


def _http_route(
    router: VirtualRouterIdentity,
    http_route: HTTPRoute,
    virtual_nodes: VirtualNodeTable,
) -> HTTPRouteSpec:
    _check_http_match(http_route.match)
    return HTTPRouteSpec(
        match=http_route.match,
        action=_action(router, http_route.action, virtual_nodes),
        retry_policy=http_route.retry_policy,
        timeout=http_route.timeout,
    )


def _grpc_route(
    router: VirtualRouterIdentity,
    grpc_route: GRPCRoute,
    virtual_nodes: VirtualNodeTable,
) -> GRPCRouteSpec:
    _check_grpc_match(grpc_route.match)
    return GRPCRouteSpec(
        match=grpc_route.match,
        action=_action(router, grpc_route.action, virtual_nodes),
        retry_policy=grpc_route.retry_policy,
        timeout=grpc_route.timeout,
    )


def _tcp_route(
    router: VirtualRouterIdentity,
    tcp_route: TCPRoute,
    virtual_nodes: VirtualNodeTable,
) -> TCPRouteSpec:
    return TCPRouteSpec(
        action=_action(router, tcp_route.action, virtual_nodes),
        match=tcp_route.match,
        timeout=tcp_route.timeout,
    )


def _action(
    router: VirtualRouterIdentity,
    action: RouteAction,
    virtual_nodes: VirtualNodeTable,
) -> RouteActionSpec:
    return RouteActionSpec(
        weighted_targets=tuple(
            _weighted_target(router, target, virtual_nodes) for target in action.weighted_targets
        )
    )


def _weighted_target(
    router: VirtualRouterIdentity,
    target: WeightedTarget,
    virtual_nodes: VirtualNodeTable,
) -> WeightedTargetSpec:
    if target.virtual_node_ref is not None and target.virtual_node_arn is not None:
        raise ConversionError("weighted target sets both virtualNodeRef and virtualNodeARN")
    if target.virtual_node_ref is not None:
        virtual_node = resolve_virtual_node(router, target.virtual_node_ref, virtual_nodes)
    elif target.virtual_node_arn is not None:
        virtual_node = _virtual_node_name_from_arn(target.virtual_node_arn)
    else:
        raise ConversionError("weighted target sets neither virtualNodeRef nor virtualNodeARN")
    return WeightedTargetSpec(virtual_node=virtual_node, weight=target.weight, port=target.port)


def _virtual_node_name_from_arn(arn: str) -> str:
    # arn:aws:appmesh:<region>:<account>:mesh/<mesh>/virtualNode/<name>
    _, sep, name = arn.rpartition("/virtualNode/")
    if not sep or not name or "/" in name:
        raise ConversionError(f"malformed virtualNodeARN: {arn}")
    return name


def _check_http_match(match: HTTPRouteMatch) -> None:
    if match.path is not None and (match.path.exact is None) == (match.path.regex is None):
        raise ConversionError("path match must set exactly one of exact, regex")
    for header in match.headers or ():
        _check_match_method(header.match, what=f"header {header.name}")


def _check_grpc_match(match: GRPCRouteMatch) -> None:
    if match.method_name is not None and match.service_name is None:
        raise ConversionError("gRPC methodName requires serviceName")
    for entry in match.metadata or ():
        _check_match_method(entry.match, what=f"metadata {entry.name}")


def _check_match_method(method: HeaderMatchMethod | None, *, what: str) -> None:
    if method is None:
        return
    chosen = _set_fields(
        ("exact", method.exact),
        ("prefix", method.prefix),
        ("suffix", method.suffix),
        ("regex", method.regex),
        ("range", method.range),
    )
    if len(chosen) > 1:
        raise ConversionError(f"{what} sets more than one match method: {', '.join(chosen)}")
    if method.range is not None and method.range.start >= method.range.end:
        raise ConversionError(f"{what} range start must be below end")


def _set_fields(*pairs: tuple[str, object]) -> list[str]:
    return [name for name, value in pairs if value is not None]


__all__ = ["build_route_spec", "resolve_virtual_node"]
