from __future__ import annotations

from meshsync.domain.model import (
    Duration,
    DurationUnit,
    HTTPHeaderMatch,
    HTTPRetryPolicy,
    HTTPRouteMatch,
    HTTPRouteSpec,
    RouteActionSpec,
    RouteSpec,
    WeightedTargetSpec,
)
from meshsync.domain.reconciliation import spec_diff, specs_equal


def _spec(
    *,
    retry_events: tuple[str, ...] | None = None,
    weight: int = 1,
    headers: tuple[HTTPHeaderMatch, ...] | None = None,
) -> RouteSpec:
    return RouteSpec(
        http_route=HTTPRouteSpec(
            match=HTTPRouteMatch(prefix="/", headers=headers),
            action=RouteActionSpec(
                weighted_targets=(WeightedTargetSpec(virtual_node="node-a_shop", weight=weight),)
            ),
            retry_policy=HTTPRetryPolicy(
                max_retries=1,
                per_retry_timeout=Duration(unit=DurationUnit.SECONDS, value=2),
                http_retry_events=retry_events,
            ),
        )
    )


def test_empty_and_absent_collections_are_equal() -> None:
    desired = _spec(retry_events=(), headers=())
    actual = _spec(retry_events=None, headers=None)

    assert specs_equal(desired, actual)
    assert spec_diff(desired, actual) == []


def test_empty_and_absent_differ_without_equate_empty() -> None:
    desired = _spec(retry_events=())
    actual = _spec(retry_events=None)

    assert not specs_equal(desired, actual, equate_empty=False)
    assert spec_diff(desired, actual, equate_empty=False) == [
        "http_route.retry_policy.http_retry_events: () -> <absent>"
    ]


def test_changed_leaf_is_reported_with_its_path() -> None:
    diff = spec_diff(_spec(weight=2), _spec(weight=1))

    assert diff == ["http_route.action.weighted_targets[0].weight: 2 -> 1"]


def test_sequence_order_matters() -> None:
    desired = _spec(retry_events=("server-error", "gateway-error"))
    actual = _spec(retry_events=("gateway-error", "server-error"))

    assert not specs_equal(desired, actual)


def test_lists_and_tuples_compare_by_content() -> None:
    assert specs_equal({"events": ["a", "b"]}, {"events": ("a", "b")})
    assert spec_diff({"events": ["a"]}, {}) == ["events: ['a'] -> <absent>"]


def test_variant_moved_between_slots_is_a_change() -> None:
    body = _spec().http_route
    desired = RouteSpec(http2_route=body)
    actual = RouteSpec(http_route=body)

    assert not specs_equal(desired, actual)
    assert len(spec_diff(desired, actual)) == 2
