"""
Routing errors.

Non-matches are never errors at the lookup level; these are raised by
configuration mistakes and by :meth:`RouteTable.dispatch`, where the
caller asked for a handler to run.
"""

from typing import FrozenSet, Iterable, Optional


class RoutingError(Exception):
    """Base class for route table errors."""


class RouteTableFrozen(RoutingError):
    """Routes or hooks were added after the table was frozen.

    Errors of this type can only be raised during setup, never while
    serving requests.
    """


class NotFound(RoutingError):
    """No route matched the request path."""

    status = 404

    def __init__(self, method: str, path: str, message: Optional[str] = None):
        self.method = method
        self.path = path
        super().__init__(message or f"No route matches {method} {path!r}")


class MethodNotAllowed(NotFound):
    """The path matched, but not for the requested method."""

    status = 405

    def __init__(self, method: str, path: str, allowed: Iterable[str]):
        self.allowed: FrozenSet[str] = frozenset(allowed)
        super().__init__(
            method,
            path,
            f"Method {method} not allowed for {path!r}; allowed: {', '.join(sorted(self.allowed))}",
        )
