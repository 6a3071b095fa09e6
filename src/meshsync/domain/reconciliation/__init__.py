"""Route reconciliation core.

Flow of one pass:
1) list remote route refs for the router
2) match them by name against the desired routes
3) create desired-only routes
4) describe matched routes, update those whose spec drifted
5) delete observed-only routes

``RoutesReconciler.remove`` runs a restricted pass that deletes only routes
blocking a listener change (see ``taint``).
"""

from __future__ import annotations

from .compare import spec_diff, specs_equal
from .engine import RoutesReconciler
from .match import MatchedRoute, RouteMatch, match_routes
from .spec_builder import build_route_spec, resolve_virtual_node
from .taint import conflicts_with_listeners, tainted_route_names, tainted_route_refs

__all__ = [
    "MatchedRoute",
    "RouteMatch",
    "RoutesReconciler",
    "build_route_spec",
    "conflicts_with_listeners",
    "match_routes",
    "resolve_virtual_node",
    "spec_diff",
    "specs_equal",
    "tainted_route_names",
    "tainted_route_refs",
]
