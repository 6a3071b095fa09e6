"""Errors raised by the reconciliation core."""

from __future__ import annotations

from meshsync.domain.ports import NotFoundError


class ReconciliationError(RuntimeError):
    """Raised when a reconcile pass cannot complete."""


class RouteNotFoundError(ReconciliationError, NotFoundError):
    """A route returned by the listing was gone when it was described.

    Callers catching :class:`NotFoundError` see it too; ``route_name`` names the route.
    """

    def __init__(self, route_name: str) -> None:
        super().__init__(f"route not found: {route_name}")
        self.route_name = route_name


class ConversionError(ValueError):
    """A desired route cannot be mapped onto a remote route spec."""

    def __init__(self, message: str, *, route_name: str | None = None) -> None:
        super().__init__(f"route {route_name}: {message}" if route_name else message)
        self.route_name = route_name


class DuplicateRouteNameError(ValueError):
    """Two routes on the same side of a match share a name."""

    def __init__(self, route_name: str, *, side: str) -> None:
        super().__init__(f"duplicate {side} route name: {route_name}")
        self.route_name = route_name
        self.side = side
