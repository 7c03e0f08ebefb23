"""
Route groups - routes sharing a path prefix and a pair of hook lists.
"""

import logging
from typing import Dict, List, Optional

from ..patterns import NotAbsoluteError, ParseError, Pattern
from .errors import RouteTableFrozen
from .route import AfterHook, BeforeHook, Handler, Route

logger = logging.getLogger("genuine.routing")


def join_prefix(prefix: str, pattern: str) -> str:
    """
    Join a group prefix and a route pattern.

        >>> join_prefix("/app", "/users")
        '/app/users'
        >>> join_prefix("/app/", "/")
        '/app'
        >>> join_prefix("", "/")
        '/'
    """
    if not prefix:
        return pattern
    prefix = prefix.rstrip("/")
    if pattern == "/":
        return prefix or "/"
    return prefix + pattern


class Group:
    """
    Routes registered under a common prefix.

    Usage::

        group = Group("/app")
        group.get("/users/{id}", show_user)
        table.mount_group(group)
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix
        # Routes keyed by upper-cased method, in registration order
        self.routes: Dict[str, List[Route]] = {}
        self.before: List[BeforeHook] = []
        self.after: List[AfterHook] = []
        self._frozen = False

    def add(self, method: str, pattern: str, handler: Handler, name: Optional[str] = None) -> Route:
        """Compile ``prefix + pattern`` and register it for ``method``."""
        if self._frozen:
            raise RouteTableFrozen(f"Cannot add {method} {pattern!r}: route table is frozen")

        method = method.upper()
        full = join_prefix(self.prefix, pattern)
        try:
            if not pattern.startswith("/"):
                # The prefix would otherwise hide a relative pattern
                raise NotAbsoluteError(0, pattern=pattern)
            compiled = Pattern.compile(full)
        except ParseError as exc:
            logger.warning("Rejected route pattern %r: %s", full, exc)
            raise

        if full != "/" and full.endswith("/"):
            logger.warning(
                "Route pattern %r ends with '/' and cannot match a normalized path", full
            )

        route = Route(method=method, pattern=compiled, handler=handler, name=name)
        self.routes.setdefault(method, []).append(route)
        logger.debug("Registered route %s", route)
        return route

    def get(self, pattern: str, handler: Handler, name: Optional[str] = None) -> Route:
        return self.add("GET", pattern, handler, name)

    def post(self, pattern: str, handler: Handler, name: Optional[str] = None) -> Route:
        return self.add("POST", pattern, handler, name)

    def put(self, pattern: str, handler: Handler, name: Optional[str] = None) -> Route:
        return self.add("PUT", pattern, handler, name)

    def patch(self, pattern: str, handler: Handler, name: Optional[str] = None) -> Route:
        return self.add("PATCH", pattern, handler, name)

    def delete(self, pattern: str, handler: Handler, name: Optional[str] = None) -> Route:
        return self.add("DELETE", pattern, handler, name)

    def hook(self, stage: str, func=None):
        """
        Register a ``before`` or ``after`` hook; usable as a decorator.

            @group.hook("before")
            def check(request, match): ...
        """
        if stage not in ("before", "after"):
            raise ValueError(f"Group hooks are 'before' or 'after', got {stage!r}")

        def register(hook):
            if self._frozen:
                raise RouteTableFrozen(f"Cannot add {stage} hook: route table is frozen")
            getattr(self, stage).append(hook)
            return hook

        if func is None:
            return register
        return register(func)

    def iter_routes(self):
        for routes in self.routes.values():
            yield from routes

    def freeze(self) -> None:
        """Make the group read-only."""
        self._frozen = True
        self.before = tuple(self.before)
        self.after = tuple(self.after)
        self.routes = {method: tuple(routes) for method, routes in self.routes.items()}
        for route in self.iter_routes():
            route.freeze()

    def __repr__(self) -> str:
        count = sum(len(routes) for routes in self.routes.values())
        return f"<Group prefix={self.prefix!r} routes={count}>"
