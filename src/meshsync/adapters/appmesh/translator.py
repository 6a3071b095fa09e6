"""Translate App Mesh route payloads to and from domain route specs.

Absent lists stay ``None`` and present lists become tuples, so the comparison
in the reconciler sees exactly what the control plane returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from meshsync.domain.model import (
    Duration,
    DurationUnit,
    GRPCRetryPolicy,
    GRPCRouteMatch,
    GRPCRouteMetadata,
    GRPCRouteSpec,
    HeaderMatchMethod,
    HTTPHeaderMatch,
    HTTPPathMatch,
    HTTPQueryParameter,
    HTTPRetryPolicy,
    HTTPRouteMatch,
    HTTPRouteSpec,
    HTTPTimeout,
    MatchRange,
    QueryParameterMatch,
    ResourceMetadata,
    RouteActionSpec,
    RouteRecord,
    RouteRef,
    RouteSpec,
    TCPRouteMatch,
    TCPRouteSpec,
    TCPTimeout,
    WeightedTargetSpec,
)

from .schema import (
    DurationPayload,
    GrpcRetryPolicyPayload,
    GrpcRouteMatchPayload,
    GrpcRouteMetadataPayload,
    GrpcRoutePayload,
    HeaderMatchMethodPayload,
    HttpPathMatchPayload,
    HttpQueryParameterPayload,
    HttpRetryPolicyPayload,
    HttpRouteHeaderPayload,
    HttpRouteMatchPayload,
    HttpRoutePayload,
    HttpTimeoutPayload,
    MatchRangePayload,
    QueryParameterMatchPayload,
    RouteActionPayload,
    RouteSpecPayload,
    TcpRouteMatchPayload,
    TcpRoutePayload,
    TcpTimeoutPayload,
    WeightedTargetPayload,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .schema import RouteDataPayload, RouteRefPayload


def _tuple_or_none[S, T](items: Sequence[S] | None, convert: Callable[[S], T]) -> tuple[T, ...] | None:
    if items is None:
        return None
    return tuple(convert(item) for item in items)


def _list_or_none[S, T](items: Sequence[S] | None, convert: Callable[[S], T]) -> list[T] | None:
    if items is None:
        return None
    return [convert(item) for item in items]


def _identity[T](value: T) -> T:
    return value


# -- payload -> domain -------------------------------------------------------


def route_ref_from_payload(payload: RouteRefPayload) -> RouteRef:
    return RouteRef(
        mesh_name=payload.mesh_name,
        virtual_router_name=payload.virtual_router_name,
        route_name=payload.route_name,
        mesh_owner=payload.mesh_owner,
        resource_owner=payload.resource_owner,
        arn=payload.arn,
        version=payload.version,
    )


def route_record_from_payload(payload: RouteDataPayload) -> RouteRecord:
    metadata = payload.metadata
    return RouteRecord(
        mesh_name=payload.mesh_name,
        virtual_router_name=payload.virtual_router_name,
        route_name=payload.route_name,
        spec=route_spec_from_payload(payload.spec),
        metadata=ResourceMetadata(
            arn=metadata.arn,
            mesh_owner=metadata.mesh_owner,
            resource_owner=metadata.resource_owner,
            uid=metadata.uid,
            version=metadata.version,
            created_at=metadata.created_at,
            last_updated_at=metadata.last_updated_at,
        ),
        status=payload.status.status if payload.status is not None else None,
    )


def route_spec_from_payload(payload: RouteSpecPayload) -> RouteSpec:
    return RouteSpec(
        priority=payload.priority,
        http_route=_http_route_from_payload(payload.http_route) if payload.http_route else None,
        http2_route=_http_route_from_payload(payload.http2_route) if payload.http2_route else None,
        grpc_route=_grpc_route_from_payload(payload.grpc_route) if payload.grpc_route else None,
        tcp_route=_tcp_route_from_payload(payload.tcp_route) if payload.tcp_route else None,
    )


def _duration(payload: DurationPayload | None) -> Duration | None:
    if payload is None:
        return None
    return Duration(unit=DurationUnit(payload.unit), value=payload.value)


def _required_duration(payload: DurationPayload) -> Duration:
    return Duration(unit=DurationUnit(payload.unit), value=payload.value)


def _action_from_payload(payload: RouteActionPayload) -> RouteActionSpec:
    return RouteActionSpec(
        weighted_targets=_tuple_or_none(
            payload.weighted_targets,
            lambda target: WeightedTargetSpec(
                virtual_node=target.virtual_node, weight=target.weight, port=target.port
            ),
        )
    )


def _match_method(payload: HeaderMatchMethodPayload | None) -> HeaderMatchMethod | None:
    if payload is None:
        return None
    return HeaderMatchMethod(
        exact=payload.exact,
        prefix=payload.prefix,
        suffix=payload.suffix,
        regex=payload.regex,
        range=MatchRange(start=payload.range.start, end=payload.range.end)
        if payload.range is not None
        else None,
    )


def _http_header(payload: HttpRouteHeaderPayload) -> HTTPHeaderMatch:
    return HTTPHeaderMatch(
        name=payload.name, match=_match_method(payload.match), invert=payload.invert
    )


def _query_parameter(payload: HttpQueryParameterPayload) -> HTTPQueryParameter:
    match = QueryParameterMatch(exact=payload.match.exact) if payload.match is not None else None
    return HTTPQueryParameter(name=payload.name, match=match)


def _http_match(payload: HttpRouteMatchPayload) -> HTTPRouteMatch:
    path = payload.path
    return HTTPRouteMatch(
        prefix=payload.prefix,
        path=HTTPPathMatch(exact=path.exact, regex=path.regex) if path is not None else None,
        method=payload.method,
        scheme=payload.scheme,
        headers=_tuple_or_none(payload.headers, _http_header),
        query_parameters=_tuple_or_none(payload.query_parameters, _query_parameter),
        port=payload.port,
    )


def _http_timeout(payload: HttpTimeoutPayload | None) -> HTTPTimeout | None:
    if payload is None:
        return None
    return HTTPTimeout(per_request=_duration(payload.per_request), idle=_duration(payload.idle))


def _http_retry_policy(payload: HttpRetryPolicyPayload | None) -> HTTPRetryPolicy | None:
    if payload is None:
        return None
    return HTTPRetryPolicy(
        max_retries=payload.max_retries,
        per_retry_timeout=_required_duration(payload.per_retry_timeout),
        http_retry_events=_tuple_or_none(payload.http_retry_events, str),
        tcp_retry_events=_tuple_or_none(payload.tcp_retry_events, str),
    )


def _http_route_from_payload(payload: HttpRoutePayload) -> HTTPRouteSpec:
    return HTTPRouteSpec(
        match=_http_match(payload.match),
        action=_action_from_payload(payload.action),
        retry_policy=_http_retry_policy(payload.retry_policy),
        timeout=_http_timeout(payload.timeout),
    )


def _grpc_metadata(payload: GrpcRouteMetadataPayload) -> GRPCRouteMetadata:
    return GRPCRouteMetadata(
        name=payload.name, match=_match_method(payload.match), invert=payload.invert
    )


def _grpc_retry_policy(payload: GrpcRetryPolicyPayload | None) -> GRPCRetryPolicy | None:
    if payload is None:
        return None
    return GRPCRetryPolicy(
        max_retries=payload.max_retries,
        per_retry_timeout=_required_duration(payload.per_retry_timeout),
        grpc_retry_events=_tuple_or_none(payload.grpc_retry_events, str),
        http_retry_events=_tuple_or_none(payload.http_retry_events, str),
        tcp_retry_events=_tuple_or_none(payload.tcp_retry_events, str),
    )


def _grpc_route_from_payload(payload: GrpcRoutePayload) -> GRPCRouteSpec:
    match = payload.match
    return GRPCRouteSpec(
        match=GRPCRouteMatch(
            service_name=match.service_name,
            method_name=match.method_name,
            metadata=_tuple_or_none(match.metadata, _grpc_metadata),
            port=match.port,
        ),
        action=_action_from_payload(payload.action),
        retry_policy=_grpc_retry_policy(payload.retry_policy),
        timeout=_http_timeout(payload.timeout),
    )


def _tcp_route_from_payload(payload: TcpRoutePayload) -> TCPRouteSpec:
    return TCPRouteSpec(
        action=_action_from_payload(payload.action),
        match=TCPRouteMatch(port=payload.match.port) if payload.match is not None else None,
        timeout=TCPTimeout(idle=_duration(payload.timeout.idle))
        if payload.timeout is not None
        else None,
    )


# -- domain -> payload -------------------------------------------------------


def route_spec_to_payload(spec: RouteSpec) -> RouteSpecPayload:
    return RouteSpecPayload(
        priority=spec.priority,
        http_route=_http_route_to_payload(spec.http_route) if spec.http_route else None,
        http2_route=_http_route_to_payload(spec.http2_route) if spec.http2_route else None,
        grpc_route=_grpc_route_to_payload(spec.grpc_route) if spec.grpc_route else None,
        tcp_route=_tcp_route_to_payload(spec.tcp_route) if spec.tcp_route else None,
    )


def _duration_payload(duration: Duration | None) -> DurationPayload | None:
    if duration is None:
        return None
    return DurationPayload(unit=duration.unit.value, value=duration.value)


def _required_duration_payload(duration: Duration) -> DurationPayload:
    return DurationPayload(unit=duration.unit.value, value=duration.value)


def _action_payload(action: RouteActionSpec) -> RouteActionPayload:
    return RouteActionPayload(
        weighted_targets=_list_or_none(
            action.weighted_targets,
            lambda target: WeightedTargetPayload(
                virtual_node=target.virtual_node, weight=target.weight, port=target.port
            ),
        )
    )


def _match_method_payload(method: HeaderMatchMethod | None) -> HeaderMatchMethodPayload | None:
    if method is None:
        return None
    return HeaderMatchMethodPayload(
        exact=method.exact,
        prefix=method.prefix,
        suffix=method.suffix,
        regex=method.regex,
        range=MatchRangePayload(start=method.range.start, end=method.range.end)
        if method.range is not None
        else None,
    )


def _http_match_payload(match: HTTPRouteMatch) -> HttpRouteMatchPayload:
    path = match.path
    return HttpRouteMatchPayload(
        prefix=match.prefix,
        path=HttpPathMatchPayload(exact=path.exact, regex=path.regex) if path is not None else None,
        method=match.method,
        scheme=match.scheme,
        headers=_list_or_none(
            match.headers,
            lambda header: HttpRouteHeaderPayload(
                name=header.name, match=_match_method_payload(header.match), invert=header.invert
            ),
        ),
        query_parameters=_list_or_none(
            match.query_parameters,
            lambda param: HttpQueryParameterPayload(
                name=param.name,
                match=QueryParameterMatchPayload(exact=param.match.exact)
                if param.match is not None
                else None,
            ),
        ),
        port=match.port,
    )


def _http_timeout_payload(timeout: HTTPTimeout | None) -> HttpTimeoutPayload | None:
    if timeout is None:
        return None
    return HttpTimeoutPayload(
        per_request=_duration_payload(timeout.per_request), idle=_duration_payload(timeout.idle)
    )


def _http_route_to_payload(route: HTTPRouteSpec) -> HttpRoutePayload:
    policy = route.retry_policy
    return HttpRoutePayload(
        match=_http_match_payload(route.match),
        action=_action_payload(route.action),
        retry_policy=HttpRetryPolicyPayload(
            max_retries=policy.max_retries,
            per_retry_timeout=_required_duration_payload(policy.per_retry_timeout),
            http_retry_events=_list_or_none(policy.http_retry_events, _identity),
            tcp_retry_events=_list_or_none(policy.tcp_retry_events, _identity),
        )
        if policy is not None
        else None,
        timeout=_http_timeout_payload(route.timeout),
    )


def _grpc_route_to_payload(route: GRPCRouteSpec) -> GrpcRoutePayload:
    match = route.match
    policy = route.retry_policy
    return GrpcRoutePayload(
        match=GrpcRouteMatchPayload(
            service_name=match.service_name,
            method_name=match.method_name,
            metadata=_list_or_none(
                match.metadata,
                lambda entry: GrpcRouteMetadataPayload(
                    name=entry.name, match=_match_method_payload(entry.match), invert=entry.invert
                ),
            ),
            port=match.port,
        ),
        action=_action_payload(route.action),
        retry_policy=GrpcRetryPolicyPayload(
            max_retries=policy.max_retries,
            per_retry_timeout=_required_duration_payload(policy.per_retry_timeout),
            grpc_retry_events=_list_or_none(policy.grpc_retry_events, _identity),
            http_retry_events=_list_or_none(policy.http_retry_events, _identity),
            tcp_retry_events=_list_or_none(policy.tcp_retry_events, _identity),
        )
        if policy is not None
        else None,
        timeout=_http_timeout_payload(route.timeout),
    )


def _tcp_route_to_payload(route: TCPRouteSpec) -> TcpRoutePayload:
    return TcpRoutePayload(
        action=_action_payload(route.action),
        match=TcpRouteMatchPayload(port=route.match.port) if route.match is not None else None,
        timeout=TcpTimeoutPayload(idle=_duration_payload(route.timeout.idle))
        if route.timeout is not None
        else None,
    )
