"""Identity of the virtual router being reconciled and its listener set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .enums import PortProtocol


@dataclass(slots=True, frozen=True, kw_only=True)
class MeshIdentity:
    name: str
    owner: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class VirtualRouterIdentity:
    """A virtual router as the caller knows it.

    ``namespace`` scopes symbolic virtual node references that omit one;
    ``remote_name`` is the router's name on the control plane.
    """

    namespace: str
    name: str
    remote_name: str
    mesh: MeshIdentity


@dataclass(slots=True, frozen=True, kw_only=True)
class Listener:
    port: int
    protocol: PortProtocol


@dataclass(slots=True, frozen=True)
class VirtualNodeKey:
    namespace: str
    name: str


type ListenerProtocols = Mapping[int, PortProtocol]
type VirtualNodeTable = Mapping[VirtualNodeKey, str]


def listener_protocols(listeners: Iterable[Listener]) -> dict[int, PortProtocol]:
    """Return ``{port: protocol}`` for ``listeners``; a later listener on the same port wins."""

    return {listener.port: listener.protocol for listener in listeners}
