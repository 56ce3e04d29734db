"""
pagelinks - pagination link helpers for server-rendered listings.
"""

from pagelinks.schemas import (
    ClientCommand,
    EllipsisWindow,
    Hide,
    PaginationMeta,
    PaginationOptions,
    QueryState,
    ShowAll,
)
from pagelinks.services.pagination_service import attrs_for_page_link, build_pagination
from pagelinks.utils.options import deep_merge, maybe_put, merge_opts
from pagelinks.utils.pagination import get_page_link_range
from pagelinks.utils.paths import build_page_link_helper, build_path
from pagelinks.utils.query_params import ensure_page_based_params, to_query
from pagelinks.utils.validators import (
    PaginationConfigError,
    validate_path_or_event,
    validate_path_or_on_paginate,
)

__all__ = [
    "ClientCommand",
    "EllipsisWindow",
    "Hide",
    "PaginationMeta",
    "PaginationOptions",
    "QueryState",
    "ShowAll",
    "attrs_for_page_link",
    "build_pagination",
    "deep_merge",
    "maybe_put",
    "merge_opts",
    "get_page_link_range",
    "build_page_link_helper",
    "build_path",
    "ensure_page_based_params",
    "to_query",
    "PaginationConfigError",
    "validate_path_or_event",
    "validate_path_or_on_paginate",
]
