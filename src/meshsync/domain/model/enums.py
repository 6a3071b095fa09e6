"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class PortProtocol(StrEnum):
    TCP = "tcp"
    HTTP = "http"
    HTTP2 = "http2"
    GRPC = "grpc"


class RouteKind(StrEnum):
    """Which route variant a desired route carries.

    Each kind implies exactly one listener protocol.
    """

    TCP = "tcp"
    HTTP = "http"
    HTTP2 = "http2"
    GRPC = "grpc"

    @property
    def protocol(self) -> PortProtocol:
        return PortProtocol(self.value)


class DurationUnit(StrEnum):
    SECONDS = "s"
    MILLISECONDS = "ms"
