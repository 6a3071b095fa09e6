"""Detect routes that must go before the router's listeners can change.

A listener cannot switch protocol while a route of the old protocol still
references its port, so such routes are removed ahead of the listener update.
Routes that no longer appear in the desired set are always removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meshsync.domain.model import ListenerProtocols, Route, RouteRef

    from .match import RouteMatch


def conflicts_with_listeners(route: Route, listeners: ListenerProtocols) -> bool:
    """Whether any port-pinned match of ``route`` disagrees with its listener.

    A port without a listener counts as a disagreement.
    """

    return any(listeners.get(port) != kind.protocol for kind, port in route.match_ports)


def tainted_route_names(match: RouteMatch, listeners: ListenerProtocols) -> set[str]:
    names = {ref.route_name for ref in match.observed_only}
    names.update(
        pair.route.name
        for pair in match.matched
        if conflicts_with_listeners(pair.route, listeners)
    )
    return names


def tainted_route_refs(match: RouteMatch, listeners: ListenerProtocols) -> list[RouteRef]:
    """Return the refs to delete before a listener change, ordered by route name."""

    ref_by_name = match.observed_by_name()
    return [ref_by_name[name] for name in sorted(tainted_route_names(match, listeners))]
