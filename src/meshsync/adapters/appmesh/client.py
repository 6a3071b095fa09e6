"""HTTP client for the App Mesh route API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote
from uuid import uuid4

import httpx
from pydantic import ValidationError

from meshsync.adapters.http_resilience import ResilientClient
from meshsync.domain.ports import NotFoundError, RemoteCallError

from .schema import (
    CreateRouteRequest,
    ErrorResponse,
    ListRoutesResponse,
    RouteDataPayload,
    UpdateRouteRequest,
)
from .translator import route_record_from_payload, route_ref_from_payload, route_spec_to_payload

if TYPE_CHECKING:
    from collections.abc import Callable

    from meshsync.config.control_plane import ControlPlaneConfig
    from meshsync.config.http_resilience import ResilienceConfig
    from meshsync.domain.model import MeshIdentity, RouteRecord, RouteRef, RouteSpec

log = getLogger(__name__)

API_VERSION = "v20190125"
LIST_PAGE_SIZE = 100
_NOT_FOUND_CODE = "NotFoundException"


class AppMeshRouteClient:
    """Route client speaking the App Mesh REST API.

    Each call runs its own event loop and HTTP client; the reconciler is
    synchronous and makes one call at a time.
    """

    def __init__(
        self,
        *,
        config: ControlPlaneConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def list_routes(self, mesh: MeshIdentity, virtual_router_name: str) -> list[RouteRef]:
        return asyncio.run(self._list_routes_async(mesh, virtual_router_name))

    def describe_route(self, ref: RouteRef) -> RouteRecord:
        payload = asyncio.run(
            self._call(
                "GET",
                _route_path(ref.mesh_name, ref.virtual_router_name, ref.route_name),
                mesh_owner=self._mesh_owner(ref.mesh_owner),
            )
        )
        return _route_record(payload)

    def create_route(
        self,
        mesh: MeshIdentity,
        virtual_router_name: str,
        route_name: str,
        spec: RouteSpec,
    ) -> RouteRecord:
        body = CreateRouteRequest(
            route_name=route_name,
            spec=route_spec_to_payload(spec),
            client_token=str(uuid4()),
        )
        payload = asyncio.run(
            self._call(
                "PUT",
                _routes_path(mesh.name, virtual_router_name),
                mesh_owner=self._mesh_owner(mesh.owner),
                json=body.model_dump(mode="json", by_alias=True, exclude_none=True),
            )
        )
        return _route_record(payload)

    def update_route(self, ref: RouteRef, spec: RouteSpec) -> RouteRecord:
        body = UpdateRouteRequest(spec=route_spec_to_payload(spec), client_token=str(uuid4()))
        payload = asyncio.run(
            self._call(
                "PUT",
                _route_path(ref.mesh_name, ref.virtual_router_name, ref.route_name),
                mesh_owner=self._mesh_owner(ref.mesh_owner),
                json=body.model_dump(mode="json", by_alias=True, exclude_none=True),
            )
        )
        return _route_record(payload)

    def delete_route(self, ref: RouteRef) -> None:
        asyncio.run(
            self._call(
                "DELETE",
                _route_path(ref.mesh_name, ref.virtual_router_name, ref.route_name),
                mesh_owner=self._mesh_owner(ref.mesh_owner),
            )
        )

    def _mesh_owner(self, owner: str | None) -> str | None:
        return owner or self._config.mesh_owner

    async def _list_routes_async(
        self, mesh: MeshIdentity, virtual_router_name: str
    ) -> list[RouteRef]:
        refs: list[RouteRef] = []
        next_token: str | None = None
        path = _routes_path(mesh.name, virtual_router_name)

        async with self._client_factory(self._resilience) as client:
            while True:
                params: dict[str, str | int] = {"limit": LIST_PAGE_SIZE}
                if next_token is not None:
                    params["nextToken"] = next_token
                payload = await self._perform_request(
                    client=client,
                    method="GET",
                    path=path,
                    mesh_owner=self._mesh_owner(mesh.owner),
                    params=params,
                )
                try:
                    page = ListRoutesResponse.model_validate(payload)
                except ValidationError as exc:
                    raise RemoteCallError(f"Unexpected ListRoutes payload: {exc}") from exc
                refs.extend(route_ref_from_payload(item) for item in page.routes)
                if not page.next_token:
                    break
                next_token = page.next_token

        log.debug("Listed %d routes of %s/%s", len(refs), mesh.name, virtual_router_name)
        return refs

    async def _call(
        self,
        method: str,
        path: str,
        *,
        mesh_owner: str | None,
        json: object | None = None,
    ) -> object:
        async with self._client_factory(self._resilience) as client:
            return await self._perform_request(
                client=client,
                method=method,
                path=path,
                mesh_owner=mesh_owner,
                json=json,
            )

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        method: str,
        path: str,
        mesh_owner: str | None,
        params: dict[str, str | int] | None = None,
        json: object | None = None,
    ) -> object:
        query: dict[str, str | int] = dict(params or {})
        if mesh_owner:
            query["meshOwner"] = mesh_owner

        try:
            if json is None:
                response = await client.request(method, path, params=query)
            else:
                response = await client.request(method, path, params=query, json=json)
        except httpx.HTTPError as exc:
            raise RemoteCallError(f"{method} {path} failed: {exc}") from exc

        if response.is_success:
            if not response.content:
                return None
            return response.json()

        raise _error_from_response(method, path, response)


def _routes_path(mesh_name: str, virtual_router_name: str) -> str:
    return (
        f"/{API_VERSION}/meshes/{quote(mesh_name, safe='')}"
        f"/virtualRouter/{quote(virtual_router_name, safe='')}/routes"
    )


def _route_path(mesh_name: str, virtual_router_name: str, route_name: str) -> str:
    return f"{_routes_path(mesh_name, virtual_router_name)}/{quote(route_name, safe='')}"


def _route_record(payload: object) -> RouteRecord:
    try:
        return route_record_from_payload(RouteDataPayload.model_validate(payload))
    except ValidationError as exc:
        raise RemoteCallError(f"Unexpected route payload: {exc}") from exc


def _error_from_response(method: str, path: str, response: httpx.Response) -> RemoteCallError:
    code = response.headers.get("x-amzn-ErrorType", "").split(":", 1)[0] or None
    message: str | None = None
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        error = ErrorResponse.model_validate(payload)
        message = error.text
        if code is None and error.error_type:
            code = error.error_type.rsplit("#", 1)[-1]

    text = f"{method} {path} returned {response.status_code}"
    if code:
        text = f"{text} {code}"
    if message:
        text = f"{text}: {message}"

    if code == _NOT_FOUND_CODE or (code is None and response.status_code == 404):
        return NotFoundError(text, code=code, status=response.status_code)
    log.error(text)
    return RemoteCallError(text, code=code, status=response.status_code)
