"""In-memory route client recording every call it receives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from meshsync.domain.model import ResourceMetadata, RouteRecord, RouteRef
from meshsync.domain.ports import NotFoundError, RemoteCallError

if TYPE_CHECKING:
    from meshsync.domain.model import MeshIdentity, RouteSpec


@dataclass
class FakeRouteClient:
    """Stores routes per name and records ``(operation, route_name)`` calls.

    ``missing_on_describe`` / ``missing_on_delete`` simulate routes vanishing
    between calls; ``failures`` raises the given error for an operation.
    """

    mesh_name: str = "global"
    mesh_owner: str | None = "111122223333"
    virtual_router_name: str = "checkout-router_shop"
    records: dict[str, RouteRecord] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)
    missing_on_describe: set[str] = field(default_factory=set)
    missing_on_delete: set[str] = field(default_factory=set)
    failures: dict[tuple[str, str], Exception] = field(default_factory=dict)
    _version: int = 0

    def seed(self, name: str, spec: RouteSpec) -> RouteRecord:
        record = self._record(name, spec)
        self.records[name] = record
        return record

    @property
    def mutations(self) -> list[tuple[str, str]]:
        return [call for call in self.calls if call[0] in {"create", "update", "delete"}]

    def list_routes(self, mesh: MeshIdentity, virtual_router_name: str) -> list[RouteRef]:
        self.calls.append(("list", virtual_router_name))
        self._maybe_fail("list", virtual_router_name)
        return [record.ref for record in self.records.values()]

    def describe_route(self, ref: RouteRef) -> RouteRecord:
        self.calls.append(("describe", ref.route_name))
        self._maybe_fail("describe", ref.route_name)
        if ref.route_name in self.missing_on_describe or ref.route_name not in self.records:
            raise NotFoundError(f"route {ref.route_name} not found", code="NotFoundException")
        return self.records[ref.route_name]

    def create_route(
        self,
        mesh: MeshIdentity,
        virtual_router_name: str,
        route_name: str,
        spec: RouteSpec,
    ) -> RouteRecord:
        self.calls.append(("create", route_name))
        self._maybe_fail("create", route_name)
        return self.seed(route_name, spec)

    def update_route(self, ref: RouteRef, spec: RouteSpec) -> RouteRecord:
        self.calls.append(("update", ref.route_name))
        self._maybe_fail("update", ref.route_name)
        return self.seed(ref.route_name, spec)

    def delete_route(self, ref: RouteRef) -> None:
        self.calls.append(("delete", ref.route_name))
        self._maybe_fail("delete", ref.route_name)
        if ref.route_name in self.missing_on_delete:
            self.records.pop(ref.route_name, None)
            raise NotFoundError(f"route {ref.route_name} not found", code="NotFoundException")
        self.records.pop(ref.route_name, None)

    def _maybe_fail(self, operation: str, name: str) -> None:
        error = self.failures.get((operation, name))
        if error is not None:
            raise error

    def _record(self, name: str, spec: RouteSpec) -> RouteRecord:
        self._version += 1
        return RouteRecord(
            mesh_name=self.mesh_name,
            virtual_router_name=self.virtual_router_name,
            route_name=name,
            spec=spec,
            metadata=ResourceMetadata(
                arn=f"arn:aws:appmesh:eu-west-1:{self.mesh_owner}:mesh/{self.mesh_name}"
                f"/virtualRouter/{self.virtual_router_name}/route/{name}",
                mesh_owner=self.mesh_owner,
                resource_owner=self.mesh_owner,
                version=self._version,
            ),
            status="ACTIVE",
        )


def throttled(name: str) -> RemoteCallError:
    return RemoteCallError(f"rate exceeded for {name}", code="TooManyRequestsException", status=429)
