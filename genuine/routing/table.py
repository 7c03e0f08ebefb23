"""
Route table with first-match lookup and hook dispatch.

Routes are registered during setup and the table is frozen before it is
shared with request handlers. After :meth:`RouteTable.freeze` nothing in
the table changes, so lookups from concurrent requests need no locking.
"""

import logging
from typing import Callable, Iterator, List, Optional, Set

from ..config import RoutingConfig
from .errors import MethodNotAllowed, NotFound, RouteTableFrozen
from .group import Group
from .route import AfterHook, BeforeHook, BeginHook, FinishHook, Handler, Route, RouteMatch

logger = logging.getLogger("genuine.routing")

HOOK_STAGES = ("begin", "before", "after", "finish")


def normalize_path(path: str) -> str:
    """Strip exactly one trailing '/' unless the path is the root."""
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


class RouteTable:
    """
    Method-keyed route table made of prefix groups.

    Usage::

        table = RouteTable()
        table.get("/", index)
        table.mount("/api", lambda group: group.get("/users/{id}", show_user))
        table.freeze()
        match = table.lookup("GET", "/api/users/42")
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        self.config = config or RoutingConfig()
        # The root group always comes first
        self.groups: List[Group] = [Group("")]
        self.begin: List[BeginHook] = []
        self.before: List[BeforeHook] = []
        self.after: List[AfterHook] = []
        self.finish: List[FinishHook] = []
        self._frozen = False

    @property
    def root(self) -> Group:
        return self.groups[0]

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── registration ────────────────────────────────────────────────────

    def add(self, method: str, pattern: str, handler: Handler, name: Optional[str] = None) -> Route:
        """Register a route on the root group."""
        return self.root.add(method, pattern, handler, name)

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

    def mount(self, prefix: str, func: Callable[[Group], None]) -> "RouteTable":
        """Create a group under ``prefix``, let ``func`` fill it, and mount it."""
        group = Group(prefix)
        func(group)
        return self.mount_group(group)

    def mount_group(self, group: Group) -> "RouteTable":
        self._check_mutable("mount group")
        self.groups.append(group)
        logger.debug("Mounted %r", group)
        return self

    def hook(self, stage: str, func=None):
        """
        Register a table-level hook for ``stage``; usable as a decorator.

            @table.hook("finish")
            def log_outcome(method, path, response): ...
        """
        if stage not in HOOK_STAGES:
            raise ValueError(f"Unknown hook stage {stage!r}, expected one of {', '.join(HOOK_STAGES)}")

        def register(hook):
            self._check_mutable(f"add {stage} hook")
            getattr(self, stage).append(hook)
            return hook

        if func is None:
            return register
        return register(func)

    def freeze(self) -> "RouteTable":
        """Make the table read-only. Idempotent."""
        if self._frozen:
            return self
        for group in self.groups:
            group.freeze()
        self.groups = tuple(self.groups)
        for stage in HOOK_STAGES:
            setattr(self, stage, tuple(getattr(self, stage)))
        self._frozen = True
        logger.info("Route table frozen with %d route(s) in %d group(s)", len(self.routes), len(self.groups))
        return self

    def _check_mutable(self, action: str) -> None:
        if self._frozen:
            raise RouteTableFrozen(f"Cannot {action}: route table is frozen")

    # ── lookup ──────────────────────────────────────────────────────────

    @property
    def routes(self) -> List[Route]:
        """All routes, in lookup order per method."""
        return [route for group in self.groups for route in group.iter_routes()]

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def normalize(self, path: str) -> str:
        if self.config.strip_trailing_slash:
            return normalize_path(path)
        return path

    def lookup(self, method: str, path: str) -> Optional[RouteMatch]:
        """
        Find the first route for ``method`` whose pattern matches ``path``.

        Groups are tried in mount order and routes in registration order.
        Returns None when nothing matches.
        """
        method = method.upper()
        path = self.normalize(path)
        reject_empty = self.config.reject_empty_params

        for group in self.groups:
            for route in group.routes.get(method, ()):
                matches = route.pattern.try_match(path)
                if matches is None:
                    continue
                if reject_empty and any(not m.value for m in matches):
                    continue
                return RouteMatch(route=route, group=group, matches=tuple(matches))

        return None

    def allowed_methods(self, path: str) -> Set[str]:
        """Methods that have at least one route matching ``path``."""
        allowed = set()
        for group in self.groups:
            for method in group.routes:
                if method not in allowed and self.lookup(method, path) is not None:
                    allowed.add(method)
        return allowed

    # ── dispatch ────────────────────────────────────────────────────────

    def dispatch(self, method: str, path: str, request=None):
        """
        Run hooks and the matched handler for a request.

        Order: begin hooks, lookup, table/group/route before hooks,
        handler, route/group/table after hooks, finish hooks.

        Raises:
            MethodNotAllowed: The path matches routes of other methods only
            NotFound: No route matches the path
        """
        method = method.upper()
        for hook in self.begin:
            hook(method, path)

        match = self.lookup(method, path)
        if match is None:
            for hook in self.finish:
                hook(method, path, None)
            allowed = self.allowed_methods(path)
            logger.debug("No route for %s %r (allowed: %s)", method, path, sorted(allowed))
            if allowed:
                raise MethodNotAllowed(method, path, allowed)
            raise NotFound(method, path)

        for hook in self.before:
            hook(request, match)
        for hook in match.group.before:
            hook(request, match)
        for hook in match.route.before:
            hook(request, match)

        response = match.route.handler(request, match)

        for hook in match.route.after:
            response = hook(request, match, response)
        for hook in match.group.after:
            response = hook(request, match, response)
        for hook in self.after:
            response = hook(request, match, response)

        for hook in self.finish:
            hook(method, path, response)

        return response
