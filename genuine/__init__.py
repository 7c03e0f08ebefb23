"""
genuine - URL path patterns and a small route table.

    >>> from genuine import RouteTable
    >>> table = RouteTable()
    >>> route = table.get("/users/{id}", lambda request, match: match.params["id"])
    >>> table.freeze().dispatch("GET", "/users/42")
    '42'
"""

from .config import ConfigError, RoutingConfig
from .patterns import (
    ExpectedByteError,
    ExpectedClassError,
    Literal,
    Match,
    NotAbsoluteError,
    Param,
    ParseError,
    Pattern,
    UnexpectedEndError,
    compile_pattern,
)
from .routing import (
    Group,
    MethodNotAllowed,
    NotFound,
    Route,
    RouteMatch,
    RouteTable,
    RouteTableFrozen,
    RoutingError,
    normalize_path,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Patterns
    "Pattern",
    "compile_pattern",
    "Literal",
    "Param",
    "Match",
    "ParseError",
    "ExpectedByteError",
    "ExpectedClassError",
    "UnexpectedEndError",
    "NotAbsoluteError",
    # Routing
    "RouteTable",
    "Group",
    "Route",
    "RouteMatch",
    "normalize_path",
    "RoutingError",
    "NotFound",
    "MethodNotAllowed",
    "RouteTableFrozen",
    # Config
    "RoutingConfig",
    "ConfigError",
]
