"""
Path utilities - addresses and client commands for pagination links.

Functions:
- build_path: resolve a navigation target with link parameters
- build_page_link_helper: page number -> address, for one result page
- click_cmd: combine a client command with a patch to the address
"""

from typing import Any, Callable, Dict, Optional
from urllib.parse import parse_qsl, urlsplit, urlunsplit

from pagelinks.schemas.meta import PaginationMeta
from pagelinks.schemas.navigation import (
    ClientCommand,
    NoPath,
    PathFunction,
    RouteFunction,
    RouteTemplate,
    StaticPath,
)
from pagelinks.utils.query_params import (
    decode_query,
    encode_query,
    ensure_page_based_params,
    to_query,
)
from pagelinks.utils.validators import coerce_path

LISTING_PARAMS = (
    "page",
    "page_size",
    "offset",
    "limit",
    "first",
    "last",
    "after",
    "before",
    "order_by",
    "order_directions",
    "filters",
)


def _with_query(path: str, params: Dict[str, Any]) -> str:
    """
    Append params to path, merging with any query string already present.

    Listing params already in the path are dropped, so the link carries only
    those of the current query. Other params are kept.
    """
    scheme, netloc, url_path, existing, fragment = urlsplit(path)
    merged = decode_query(parse_qsl(existing, keep_blank_values=True))
    for key in LISTING_PARAMS:
        merged.pop(key, None)
    merged.update(params)
    return urlunsplit((scheme, netloc, url_path, encode_query(merged), fragment))


def build_path(target: Any, params: Dict[str, Any]) -> Optional[str]:
    """
    Build the address of a link from a navigation target and link parameters.

    Args:
        target: A NavigationTarget, or any raw path shape accepted by
            pagelinks.utils.validators.coerce_path()
        params: Link parameters, as returned by to_query()

    Returns:
        The address, or None for NoPath

    Example:
        >>> build_path(StaticPath("/pets"), {"page": 2, "order_by": ["name"]})
        '/pets?page=2&order_by[]=name'
        >>> build_path(PathFunction(lambda p: f"/pets/page/{p.get('page', 1)}"), {"page": 3})
        '/pets/page/3'
    """
    target = coerce_path(target)

    if isinstance(target, NoPath):
        return None
    if isinstance(target, StaticPath):
        return _with_query(target.path, params)
    if isinstance(target, PathFunction):
        return target.function(params)
    if isinstance(target, RouteFunction):
        return target.function(*target.args, params)
    if isinstance(target, RouteTemplate):
        route_path = target.router.url_path_for(target.name, **target.path_params)
        return _with_query(str(route_path), params)

    raise TypeError(f"Unsupported navigation target: {target!r}")


def maybe_put_page(params: Dict[str, Any], page: int) -> Dict[str, Any]:
    """Set the page param; page 1 is the default page and omits it."""
    params = dict(params)
    if page == 1:
        params.pop("page", None)
    else:
        params["page"] = page
    return params


def build_query_params(meta: PaginationMeta) -> Dict[str, Any]:
    return to_query(
        ensure_page_based_params(meta.query),
        default_limit=meta.default_limit,
        default_order=meta.default_order,
    )


def build_page_link_helper(
    meta: PaginationMeta, target: Any
) -> Callable[[int], Optional[str]]:
    """
    Return a function building the address of a page link for `meta`.

    The link parameters are computed once; the helper only swaps the page.
    Without a navigation target every address is None.

    Example:
        >>> meta = PaginationMeta.from_totals(QueryState(page=3, page_size=10), 95)
        >>> link = build_page_link_helper(meta, "/pets")
        >>> link(1), link(5)
        ('/pets?page_size=10', '/pets?page=5&page_size=10')
    """
    target = coerce_path(target)
    if isinstance(target, NoPath):
        return lambda page: None

    query_params = build_query_params(meta)

    def page_link(page: int) -> Optional[str]:
        return build_path(target, maybe_put_page(query_params, page))

    return page_link


def click_cmd(
    on_paginate: Optional[ClientCommand], path: Optional[str]
) -> Optional[ClientCommand]:
    """
    Client command of a link: the configured command, then a patch to path.
    """
    if path is None:
        return on_paginate
    return (on_paginate or ClientCommand()).patch(path)
