"""Name-keyed matching of desired routes against observed route refs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from meshsync.domain.errors import DuplicateRouteNameError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from meshsync.domain.model import Route, RouteRef


@dataclass(slots=True, frozen=True, kw_only=True)
class MatchedRoute:
    route: Route
    ref: RouteRef


@dataclass(slots=True, frozen=True, kw_only=True)
class RouteMatch:
    """Partition of desired and observed routes by name.

    Each sequence is ordered by route name. The three name sets are disjoint.
    """

    matched: tuple[MatchedRoute, ...] = ()
    desired_only: tuple[Route, ...] = ()
    observed_only: tuple[RouteRef, ...] = ()

    def observed_by_name(self) -> dict[str, RouteRef]:
        refs = {pair.ref.route_name: pair.ref for pair in self.matched}
        refs.update((ref.route_name, ref) for ref in self.observed_only)
        return refs


def routes_by_name(routes: Iterable[Route]) -> dict[str, Route]:
    by_name: dict[str, Route] = {}
    for route in routes:
        if route.name in by_name:
            raise DuplicateRouteNameError(route.name, side="desired")
        by_name[route.name] = route
    return by_name


def refs_by_name(refs: Iterable[RouteRef]) -> dict[str, RouteRef]:
    by_name: dict[str, RouteRef] = {}
    for ref in refs:
        if ref.route_name in by_name:
            raise DuplicateRouteNameError(ref.route_name, side="observed")
        by_name[ref.route_name] = ref
    return by_name


def match_routes(desired: Iterable[Route], observed: Iterable[RouteRef]) -> RouteMatch:
    """Split ``desired`` and ``observed`` into matched, desired-only and observed-only."""

    route_by_name = routes_by_name(desired)
    ref_by_name = refs_by_name(observed)
    desired_names = route_by_name.keys()
    observed_names = ref_by_name.keys()

    return RouteMatch(
        matched=tuple(
            MatchedRoute(route=route_by_name[name], ref=ref_by_name[name])
            for name in sorted(desired_names & observed_names)
        ),
        desired_only=tuple(route_by_name[name] for name in sorted(desired_names - observed_names)),
        observed_only=tuple(ref_by_name[name] for name in sorted(observed_names - desired_names)),
    )
