from pagelinks.schemas.query import (
    Filter,
    FilterOp,
    OrderDirection,
    OrderSpec,
    QueryState,
)
from pagelinks.schemas.navigation import (
    ClientCommand,
    EllipsisWindow,
    Hide,
    NavigationTarget,
    NoPath,
    PathFunction,
    RouteFunction,
    RouteTemplate,
    ShowAll,
    StaticPath,
    WindowPolicy,
    parse_window_policy,
)
from pagelinks.schemas.meta import PaginationMeta
from pagelinks.schemas.options import AriaAttrs, LinkAttrs, PaginationOptions
from pagelinks.schemas.link import EllipsisMarker, PageLink, PaginationView

__all__ = [
    # Query schemas
    "Filter",
    "FilterOp",
    "OrderDirection",
    "OrderSpec",
    "QueryState",
    # Navigation schemas
    "ClientCommand",
    "EllipsisWindow",
    "Hide",
    "NavigationTarget",
    "NoPath",
    "PathFunction",
    "RouteFunction",
    "RouteTemplate",
    "ShowAll",
    "StaticPath",
    "WindowPolicy",
    "parse_window_policy",
    # Pagination schemas
    "PaginationMeta",
    "AriaAttrs",
    "LinkAttrs",
    "PaginationOptions",
    "EllipsisMarker",
    "PageLink",
    "PaginationView",
]
