"""
Routing - method-keyed route table with prefix groups and hook lists.

Routes are registered during setup and the table is frozen into a
read-only structure before requests are served.
"""

from .errors import MethodNotAllowed, NotFound, RouteTableFrozen, RoutingError
from .group import Group, join_prefix
from .route import (
    AfterHook,
    BeforeHook,
    BeginHook,
    FinishHook,
    Handler,
    Route,
    RouteMatch,
)
from .table import HOOK_STAGES, RouteTable, normalize_path

__all__ = [
    "RouteTable",
    "Group",
    "Route",
    "RouteMatch",
    "normalize_path",
    "join_prefix",
    "HOOK_STAGES",
    # Hook types
    "Handler",
    "BeginHook",
    "BeforeHook",
    "AfterHook",
    "FinishHook",
    # Errors
    "RoutingError",
    "NotFound",
    "MethodNotAllowed",
    "RouteTableFrozen",
]
