"""Port for the remote control plane that stores virtual router routes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from meshsync.domain.model import MeshIdentity, RouteRecord, RouteRef, RouteSpec


class RemoteCallError(RuntimeError):
    """Raised by route clients when a control-plane call fails."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status = status


class NotFoundError(RemoteCallError):
    """Raised by route clients when the addressed route does not exist."""


@runtime_checkable
class RouteClient(Protocol):
    """Remote route operations used by the reconciler.

    Implementations raise :class:`NotFoundError` for missing routes and
    :class:`RemoteCallError` for every other failure.
    """

    def list_routes(self, mesh: MeshIdentity, virtual_router_name: str) -> list[RouteRef]:
        """Return every route ref of the router, following all pages."""
        ...

    def describe_route(self, ref: RouteRef) -> RouteRecord: ...

    def create_route(
        self,
        mesh: MeshIdentity,
        virtual_router_name: str,
        route_name: str,
        spec: RouteSpec,
    ) -> RouteRecord: ...

    def update_route(self, ref: RouteRef, spec: RouteSpec) -> RouteRecord: ...

    def delete_route(self, ref: RouteRef) -> None: ...


__all__ = ["NotFoundError", "RemoteCallError", "RouteClient"]
