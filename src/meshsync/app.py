"""Application wiring entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from meshsync.adapters.appmesh import AppMeshRouteClient
from meshsync.config import get_control_plane_config
from meshsync.domain.reconciliation import RoutesReconciler

if TYPE_CHECKING:
    from collections.abc import Callable

    from meshsync.adapters.http_resilience import ResilientClient
    from meshsync.config import ControlPlaneConfig, ResilienceConfig
    from meshsync.domain.ports import RouteClient

log = getLogger(__name__)


def build_routes_reconciler(
    *,
    client: RouteClient | None = None,
    config: ControlPlaneConfig | None = None,
    client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
) -> RoutesReconciler:
    """Return a reconciler bound to ``client`` or to the configured control plane."""

    if client is None:
        active_config = config or get_control_plane_config()
        log.debug("Using control plane at %s", active_config.endpoint)
        client = AppMeshRouteClient(config=active_config, client_factory=client_factory)
    return RoutesReconciler(client=client)
