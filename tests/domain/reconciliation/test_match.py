from __future__ import annotations

import pytest

from meshsync.domain.errors import DuplicateRouteNameError
from meshsync.domain.reconciliation import match_routes
from tests.helpers.routes import http_route, route_ref, tcp_route


def test_match_routes_partitions_by_name() -> None:
    desired = [http_route("r3"), http_route("r1"), tcp_route("r2")]
    observed = [route_ref("r4"), route_ref("r2"), route_ref("r3")]

    match = match_routes(desired, observed)

    assert [pair.route.name for pair in match.matched] == ["r2", "r3"]
    assert [pair.ref.route_name for pair in match.matched] == ["r2", "r3"]
    assert [route.name for route in match.desired_only] == ["r1"]
    assert [ref.route_name for ref in match.observed_only] == ["r4"]


@pytest.mark.parametrize(
    ("desired_names", "observed_names"),
    [
        ((), ()),
        (("a", "b"), ()),
        ((), ("a", "b")),
        (("a", "b", "c"), ("b", "c", "d", "e")),
        (("a",), ("a",)),
    ],
)
def test_match_partition_is_disjoint_and_complete(
    desired_names: tuple[str, ...], observed_names: tuple[str, ...]
) -> None:
    match = match_routes(
        [http_route(name) for name in desired_names],
        [route_ref(name) for name in observed_names],
    )

    matched = {pair.route.name for pair in match.matched}
    desired_only = {route.name for route in match.desired_only}
    observed_only = {ref.route_name for ref in match.observed_only}

    assert not matched & desired_only
    assert not matched & observed_only
    assert not desired_only & observed_only
    assert matched | desired_only | observed_only == set(desired_names) | set(observed_names)


def test_match_never_pairs_by_content() -> None:
    match = match_routes([http_route("new-name")], [route_ref("old-name")])

    assert match.matched == ()
    assert [route.name for route in match.desired_only] == ["new-name"]
    assert [ref.route_name for ref in match.observed_only] == ["old-name"]


def test_match_rejects_duplicate_desired_names() -> None:
    with pytest.raises(DuplicateRouteNameError, match="duplicate desired route name: r1"):
        match_routes([http_route("r1"), tcp_route("r1")], [])


def test_match_rejects_duplicate_observed_names() -> None:
    with pytest.raises(DuplicateRouteNameError) as exc:
        match_routes([], [route_ref("r1"), route_ref("r1")])

    assert exc.value.side == "observed"


def test_match_does_not_mutate_inputs() -> None:
    desired = [http_route("b"), http_route("a")]
    observed = [route_ref("c")]

    match_routes(desired, observed)

    assert [route.name for route in desired] == ["b", "a"]
    assert [ref.route_name for ref in observed] == ["c"]
