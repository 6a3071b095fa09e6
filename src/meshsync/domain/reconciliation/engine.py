"""Reconcile a virtual router's routes on the control plane.

Each public operation is one stateless pass: list the remote routes (except on
first-time creation), match them by name against the desired routes, then
create, update and delete in that order. The first failing remote call aborts
the pass; nothing already applied is rolled back. Calling the same operation
again re-diffs against the partially applied state and finishes the work.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import DEBUG, getLogger
from typing import TYPE_CHECKING

from meshsync.domain.errors import RouteNotFoundError
from meshsync.domain.ports import NotFoundError

from .compare import spec_diff, specs_equal
from .match import RouteMatch, match_routes
from .spec_builder import build_route_spec
from .taint import tainted_route_refs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from meshsync.domain.model import (
        ListenerProtocols,
        Route,
        RouteRecord,
        RouteRef,
        VirtualNodeTable,
        VirtualRouterIdentity,
    )
    from meshsync.domain.ports import RouteClient

log = getLogger(__name__)


@dataclass(slots=True)
class RoutesReconciler:
    """Converge the routes of one virtual router toward a desired set.

    Not safe to run concurrently for the same router: callers serialize
    reconcile passes per router.
    """

    client: RouteClient

    def create(
        self,
        router: VirtualRouterIdentity,
        desired: Sequence[Route],
        virtual_nodes: VirtualNodeTable,
    ) -> dict[str, RouteRecord]:
        """Create every desired route on a router that has none yet."""

        return self._reconcile(router, match_routes(desired, ()), virtual_nodes)

    def update(
        self,
        router: VirtualRouterIdentity,
        desired: Sequence[Route],
        virtual_nodes: VirtualNodeTable,
    ) -> dict[str, RouteRecord]:
        """Create, update and delete routes until the router matches ``desired``."""

        refs = self._list_route_refs(router)
        return self._reconcile(router, match_routes(desired, refs), virtual_nodes)

    def remove(
        self,
        router: VirtualRouterIdentity,
        desired: Sequence[Route],
        listeners: ListenerProtocols,
    ) -> None:
        """Delete only the routes that would block a change to ``listeners``.

        Routes that are gone from ``desired`` and routes whose match port is
        bound to a listener of another protocol are removed; compatible
        routes are left alone.
        """

        refs = self._list_route_refs(router)
        for ref in tainted_route_refs(match_routes(desired, refs), listeners):
            self._delete_by_ref(ref)

    def cleanup(self, router: VirtualRouterIdentity) -> None:
        """Delete every route of the router."""

        refs = self._list_route_refs(router)
        self._reconcile(router, match_routes((), refs), {})

    def _reconcile(
        self,
        router: VirtualRouterIdentity,
        match: RouteMatch,
        virtual_nodes: VirtualNodeTable,
    ) -> dict[str, RouteRecord]:
        log.debug(
            "Reconciling routes of %s: %d to create, %d to check, %d to delete",
            router.remote_name,
            len(match.desired_only),
            len(match.matched),
            len(match.observed_only),
        )
        records: dict[str, RouteRecord] = {}

        for route in match.desired_only:
            records[route.name] = self._create(router, route, virtual_nodes)

        for pair in match.matched:
            try:
                record = self.client.describe_route(pair.ref)
            except NotFoundError:
                raise RouteNotFoundError(pair.ref.route_name) from None
            records[pair.route.name] = self._update(router, record, pair.route, virtual_nodes)

        for ref in match.observed_only:
            try:
                record = self.client.describe_route(ref)
            except NotFoundError:
                raise RouteNotFoundError(ref.route_name) from None
            self._delete_by_ref(record.ref)

        return records

    def _list_route_refs(self, router: VirtualRouterIdentity) -> list[RouteRef]:
        return self.client.list_routes(router.mesh, router.remote_name)

    def _create(
        self,
        router: VirtualRouterIdentity,
        route: Route,
        virtual_nodes: VirtualNodeTable,
    ) -> RouteRecord:
        spec = build_route_spec(router, route, virtual_nodes)
        log.info("Creating route %s on %s", route.name, router.remote_name)
        return self.client.create_route(router.mesh, router.remote_name, route.name, spec)

    def _update(
        self,
        router: VirtualRouterIdentity,
        record: RouteRecord,
        route: Route,
        virtual_nodes: VirtualNodeTable,
    ) -> RouteRecord:
        desired_spec = build_route_spec(router, route, virtual_nodes)
        if specs_equal(desired_spec, record.spec, equate_empty=True):
            return record

        if log.isEnabledFor(DEBUG):
            log.debug(
                "Route spec of %s on %s changed: %s",
                route.name,
                router.remote_name,
                "; ".join(spec_diff(desired_spec, record.spec, equate_empty=True)),
            )
        log.info("Updating route %s on %s", route.name, router.remote_name)
        return self.client.update_route(record.ref, desired_spec)

    def _delete_by_ref(self, ref: RouteRef) -> None:
        log.info("Deleting route %s on %s", ref.route_name, ref.virtual_router_name)
        try:
            self.client.delete_route(ref)
        except NotFoundError:
            log.info("Route %s already deleted", ref.route_name)
