from __future__ import annotations

from meshsync.domain.model import Listener, PortProtocol, listener_protocols
from meshsync.domain.reconciliation import match_routes, tainted_route_names, tainted_route_refs
from tests.helpers.routes import grpc_route, http_route, route_ref, tcp_route


def test_http_route_on_tcp_listener_is_tainted() -> None:
    match = match_routes([http_route("r1", port=8080)], [route_ref("r1")])

    assert tainted_route_names(match, {8080: PortProtocol.TCP}) == {"r1"}


def test_http_route_on_http_listener_is_kept() -> None:
    match = match_routes([http_route("r1", port=8080)], [route_ref("r1")])

    assert tainted_route_names(match, {8080: PortProtocol.HTTP}) == set()


def test_observed_only_routes_are_always_tainted() -> None:
    match = match_routes([http_route("keep", port=80)], [route_ref("keep"), route_ref("gone")])

    assert tainted_route_names(match, {80: PortProtocol.HTTP}) == {"gone"}


def test_routes_without_match_port_are_never_tainted() -> None:
    match = match_routes(
        [http_route("h"), tcp_route("t"), grpc_route("g"), http_route("h2", http2=True)],
        [route_ref("h"), route_ref("t"), route_ref("g"), route_ref("h2")],
    )

    assert tainted_route_names(match, {80: PortProtocol.TCP}) == set()


def test_each_variant_maps_to_its_protocol() -> None:
    desired = [
        tcp_route("tcp", port=1),
        http_route("http", port=2),
        http_route("http2", port=3, http2=True),
        grpc_route("grpc", port=4),
    ]
    match = match_routes(desired, [route_ref(route.name) for route in desired])
    matching = {
        1: PortProtocol.TCP,
        2: PortProtocol.HTTP,
        3: PortProtocol.HTTP2,
        4: PortProtocol.GRPC,
    }
    swapped = {
        1: PortProtocol.HTTP,
        2: PortProtocol.HTTP2,
        3: PortProtocol.GRPC,
        4: PortProtocol.TCP,
    }

    assert tainted_route_names(match, matching) == set()
    assert tainted_route_names(match, swapped) == {"tcp", "http", "http2", "grpc"}


def test_port_without_listener_taints_route() -> None:
    match = match_routes([tcp_route("r1", port=443)], [route_ref("r1")])

    assert tainted_route_names(match, {}) == {"r1"}


def test_desired_only_routes_are_not_considered() -> None:
    match = match_routes([tcp_route("new", port=443)], [])

    assert tainted_route_names(match, {443: PortProtocol.HTTP}) == set()


def test_tainted_route_refs_are_sorted_refs() -> None:
    listeners = listener_protocols(
        [
            Listener(port=443, protocol=PortProtocol.HTTP),
            Listener(port=8080, protocol=PortProtocol.GRPC),
        ]
    )
    match = match_routes(
        [tcp_route("b-tcp", port=443), grpc_route("c-grpc", port=8080)],
        [route_ref("z-orphan"), route_ref("b-tcp"), route_ref("c-grpc"), route_ref("a-orphan")],
    )

    refs = tainted_route_refs(match, listeners)

    assert [ref.route_name for ref in refs] == ["a-orphan", "b-tcp", "z-orphan"]
    assert refs[1] == route_ref("b-tcp")
