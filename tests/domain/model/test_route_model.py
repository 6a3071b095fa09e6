from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from meshsync.domain.model import (
    GRPCRoute,
    GRPCRouteMatch,
    HTTPRoute,
    HTTPRouteMatch,
    Listener,
    PortProtocol,
    ResourceMetadata,
    Route,
    RouteKind,
    RouteRecord,
    RouteRef,
    RouteSpec,
    TCPRoute,
    TCPRouteMatch,
    listener_protocols,
)
from tests.helpers.routes import action_to, http_route, tcp_route


@pytest.mark.parametrize("kind", list(RouteKind))
def test_route_kind_maps_to_same_named_protocol(kind: RouteKind) -> None:
    assert kind.protocol == PortProtocol(kind.value)


def test_kinds_lists_set_variants() -> None:
    assert http_route("a").kinds == (RouteKind.HTTP,)
    assert http_route("a", http2=True).kinds == (RouteKind.HTTP2,)
    assert Route(name="empty").kinds == ()


def test_match_ports_covers_every_variant_with_a_port() -> None:
    action = action_to("node-a")
    route = Route(
        name="mixed",
        http_route=HTTPRoute(match=HTTPRouteMatch(prefix="/", port=80), action=action),
        grpc_route=GRPCRoute(match=GRPCRouteMatch(port=50051), action=action),
        tcp_route=TCPRoute(action=action, match=TCPRouteMatch(port=5432)),
    )

    assert route.match_ports == (
        (RouteKind.TCP, 5432),
        (RouteKind.GRPC, 50051),
        (RouteKind.HTTP, 80),
    )


def test_match_ports_skips_unpinned_routes() -> None:
    assert http_route("a").match_ports == ()
    assert tcp_route("t").match_ports == ()
    assert tcp_route("t", port=22).match_ports == ((RouteKind.TCP, 22),)


def test_routes_are_immutable() -> None:
    route = http_route("a")

    with pytest.raises(FrozenInstanceError):
        route.name = "b"  # type: ignore[misc]


def test_record_ref_carries_remote_identity() -> None:
    record = RouteRecord(
        mesh_name="global",
        virtual_router_name="checkout-router_shop",
        route_name="r1",
        spec=RouteSpec(),
        metadata=ResourceMetadata(
            arn="arn:aws:appmesh:eu-west-1:111122223333:mesh/global/virtualRouter/x/route/r1",
            mesh_owner="111122223333",
            resource_owner="444455556666",
            version=7,
        ),
        status="ACTIVE",
    )

    assert record.ref == RouteRef(
        mesh_name="global",
        virtual_router_name="checkout-router_shop",
        route_name="r1",
        mesh_owner="111122223333",
        resource_owner="444455556666",
        arn="arn:aws:appmesh:eu-west-1:111122223333:mesh/global/virtualRouter/x/route/r1",
        version=7,
    )


def test_listener_protocols_last_listener_wins() -> None:
    listeners = [
        Listener(port=80, protocol=PortProtocol.HTTP),
        Listener(port=443, protocol=PortProtocol.TCP),
        Listener(port=80, protocol=PortProtocol.HTTP2),
    ]

    assert listener_protocols(listeners) == {80: PortProtocol.HTTP2, 443: PortProtocol.TCP}
