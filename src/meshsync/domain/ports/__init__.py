"""Domain port definitions for adapters."""

from __future__ import annotations

from .control_plane import NotFoundError, RemoteCallError, RouteClient

__all__ = [
    "NotFoundError",
    "RemoteCallError",
    "RouteClient",
]
