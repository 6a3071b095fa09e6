"""Public interface for the App Mesh route adapter."""

from __future__ import annotations

from .client import AppMeshRouteClient
from .schema import ListRoutesResponse, RouteDataPayload, RouteSpecPayload
from .translator import (
    route_record_from_payload,
    route_ref_from_payload,
    route_spec_from_payload,
    route_spec_to_payload,
)

__all__ = [
    "AppMeshRouteClient",
    "ListRoutesResponse",
    "RouteDataPayload",
    "RouteSpecPayload",
    "route_record_from_payload",
    "route_ref_from_payload",
    "route_spec_from_payload",
    "route_spec_to_payload",
]
