"""
Pagination Service - Builds the pagination controls of a result page.

Combines the link range, link addresses and resolved options into the
descriptors consumed by the templates:
- attrs_for_page_link: attributes of one page link, with its aria label
- build_pagination: the complete PaginationView for a result page
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pagelinks.schemas.link import EllipsisMarker, PageLink, PaginationView
from pagelinks.schemas.meta import PaginationMeta
from pagelinks.schemas.navigation import ClientCommand
from pagelinks.schemas.options import PaginationOptions
from pagelinks.utils.options import deep_merge, merge_opts
from pagelinks.utils.pagination import get_page_link_range, page_items
from pagelinks.utils.paths import build_page_link_helper, click_cmd
from pagelinks.utils.validators import validate_path_or_on_paginate

logger = logging.getLogger(__name__)


def attrs_for_page_link(
    page: int, meta: PaginationMeta, opts: PaginationOptions
) -> Dict[str, Any]:
    """
    Attributes of the link to `page`.

    The current page uses current_link_attrs, every other page
    pagination_link_attrs. In both cases aria.label is set from
    pagination_link_aria_label; the configured options are not modified.

    Example:
        >>> attrs_for_page_link(3, PaginationMeta(current_page=3, total_pages=5), merge_opts())
        {'class': 'pagination-link is-current', 'aria': {'current': 'page', 'label': 'Go to page 3'}}
    """
    if page == meta.current_page:
        attrs = opts.current_link_attrs
    else:
        attrs = opts.pagination_link_attrs

    return _add_page_link_aria_label(attrs.to_tree(), page, opts)


def _add_page_link_aria_label(
    attrs: Dict[str, Any], page: int, opts: PaginationOptions
) -> Dict[str, Any]:
    aria_label = opts.pagination_link_aria_label(page)
    return deep_merge(attrs, {"aria": {"label": aria_label}})


def _add_class(attrs: Dict[str, Any], css_class: str) -> Dict[str, Any]:
    attrs = dict(attrs)
    current = attrs.get("class")
    attrs["class"] = f"{current} {css_class}" if current else css_class
    return attrs


def _resolve_opts(
    opts: Union[PaginationOptions, Mapping[str, Any], None],
    global_opts: Optional[Mapping[str, Any]],
) -> PaginationOptions:
    if isinstance(opts, PaginationOptions):
        return opts
    return merge_opts(opts, global_opts)


def build_pagination(
    meta: PaginationMeta,
    path: Any = None,
    on_paginate: Optional[ClientCommand] = None,
    event: Optional[str] = None,
    opts: Union[PaginationOptions, Mapping[str, Any], None] = None,
    global_opts: Optional[Mapping[str, Any]] = None,
) -> PaginationView:
    """
    Build the pagination controls for one result page.

    Args:
        meta: Pagination metadata of the result page
        path: Navigation target or raw path shape (see validators.coerce_path)
        on_paginate: Client command run when a link is clicked
        event: Legacy click event name, exclusive with path and on_paginate
        opts: Resolved PaginationOptions, or a call-site option tree
        global_opts: Process-wide option tree; read from settings when omitted

    Returns:
        PaginationView with previous/next links and the page items

    Raises:
        PaginationConfigError: If no navigation mechanism is configured

    Example:
        >>> meta = PaginationMeta(current_page=5, total_pages=20, has_next_page=True)
        >>> view = build_pagination(meta, path="/pets", opts={"page_links": "ellipsis:5"})
        >>> [item.page_number for item in view.items if not item.is_ellipsis]
        [1, 3, 4, 5, 6, 7, 20]
    """
    target = validate_path_or_on_paginate(path, on_paginate, event)
    options = _resolve_opts(opts, global_opts)
    page_link = build_page_link_helper(meta, target)

    def make_link(
        page: int, attrs: Dict[str, Any], content: str, disabled: bool = False
    ) -> PageLink:
        link_path = None if disabled else page_link(page)
        command = None
        if on_paginate is not None and not disabled:
            command = click_cmd(on_paginate, link_path)
        return PageLink(
            page_number=page,
            is_current=page == meta.current_page,
            disabled=disabled,
            attributes=attrs,
            content=content,
            path=link_path,
            command=command,
            event=None if disabled else event,
        )

    previous_attrs = options.previous_link_attrs.to_tree()
    if not meta.has_previous_page:
        previous_attrs = _add_class(previous_attrs, options.disabled_class)
    previous_link = make_link(
        meta.previous_page or meta.current_page - 1,
        previous_attrs,
        options.previous_link_content,
        disabled=not meta.has_previous_page,
    )

    next_attrs = options.next_link_attrs.to_tree()
    if not meta.has_next_page:
        next_attrs = _add_class(next_attrs, options.disabled_class)
    next_link = make_link(
        meta.next_page or meta.current_page + 1,
        next_attrs,
        options.next_link_content,
        disabled=not meta.has_next_page,
    )

    ellipsis = EllipsisMarker(
        attributes=options.ellipsis_attrs.to_tree(),
        content=options.ellipsis_content,
    )
    items = []
    for page in page_items(meta.current_page, options.page_links, meta.total_pages):
        if page is None:
            items.append(ellipsis)
        else:
            items.append(
                make_link(page, attrs_for_page_link(page, meta, options), str(page))
            )

    page_range = get_page_link_range(
        meta.current_page, options.page_links, meta.total_pages
    )
    logger.debug(
        "Built pagination for page %s of %s with %s page links",
        meta.current_page,
        meta.total_pages,
        len(page_range),
    )

    return PaginationView(
        wrapper_attrs=options.wrapper_attrs.to_tree(),
        list_attrs=options.pagination_list_attrs.to_tree(),
        previous_link=previous_link,
        next_link=next_link,
        items=items,
        page_range=list(page_range),
        has_previous_page=meta.has_previous_page,
        has_next_page=meta.has_next_page,
        should_render=meta.should_render,
    )
