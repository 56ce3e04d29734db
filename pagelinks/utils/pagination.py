"""
Generic pagination utilities for consistent pagination across the application.

This module provides the page arithmetic behind the pagination controls:
- calculate_pagination: page count and offset from a total row count
- max_pages: number of page links a window policy allows
- get_page_link_range: the page numbers that get a direct link
- page_items: page numbers plus ellipsis slots, in rendering order

None of these functions validate that the current page lies within the
total page count; inconsistent input yields degenerate ranges, never errors.
"""

import logging
import math
from typing import List, TypedDict, Union

from pagelinks.schemas.navigation import EllipsisWindow, Hide, ShowAll, WindowPolicy

logger = logging.getLogger(__name__)

ELLIPSIS = None


class PaginationInfo(TypedDict):
    """
    Pagination metadata returned by pagination functions.

    Attributes:
        page: Current page number (1-indexed)
        per_page: Number of items per page
        total: Total number of items across all pages
        total_pages: Total number of pages
        offset: Offset for database query (0-indexed)
    """

    page: int
    per_page: int
    total: int
    total_pages: int
    offset: int


def calculate_pagination(page: int, per_page: int, total: int) -> PaginationInfo:
    """
    Calculate pagination metadata from total count.

    This is a pure function that performs pagination math without
    any database queries or model dependencies.

    Args:
        page: Current page number (1-indexed, must be >= 1)
        per_page: Items per page (must be >= 1)
        total: Total number of items (must be >= 0)

    Returns:
        PaginationInfo dict with calculated metadata

    Example:
        >>> pagination = calculate_pagination(page=2, per_page=10, total=95)
        >>> pagination["total_pages"]
        10
        >>> pagination["offset"]
        10

    Note:
        - Empty result sets (total=0) return total_pages=0
        - Ceiling division ensures partial pages are counted
    """
    total_pages = (total + per_page - 1) // per_page
    offset = (page - 1) * per_page

    return {
        "page": page,
        "per_page": per_page,
        "total": total,
        "total_pages": total_pages,
        "offset": offset,
    }


def max_pages(policy: WindowPolicy, total_pages: int) -> int:
    """Maximum number of page links the policy allows."""
    if isinstance(policy, ShowAll):
        return total_pages
    if isinstance(policy, Hide):
        return 0
    return policy.max_pages


def get_page_link_range(
    current_page: int, policy: WindowPolicy, total_pages: int
) -> range:
    """
    Compute the inclusive range of page numbers that get a direct link.

    For an EllipsisWindow the window slides with the current page and is
    anchored to the last page near the end. With an odd `max_pages` one more
    page is shown before the current page than after it.

    Args:
        current_page: Current page number (>= 1)
        policy: ShowAll, Hide or EllipsisWindow
        total_pages: Total number of pages (>= 0)

    Returns:
        Ascending range of page numbers, possibly empty

    Example:
        >>> list(get_page_link_range(5, EllipsisWindow(5), 20))
        [3, 4, 5, 6, 7]
        >>> list(get_page_link_range(19, EllipsisWindow(5), 20))
        [16, 17, 18, 19, 20]
    """
    if current_page > total_pages > 0:
        logger.warning(
            "Current page %s is beyond the last page %s", current_page, total_pages
        )

    if isinstance(policy, Hide):
        return range(1, 1)

    if isinstance(policy, ShowAll):
        return range(1, total_pages + 1)

    window = policy.max_pages
    # pages to show before or after the current page
    additional = math.ceil(window / 2)

    if window >= total_pages:
        return range(1, total_pages + 1)

    if current_page + additional >= total_pages:
        return range(total_pages - window + 1, total_pages + 1)

    first = max(current_page - additional + 1, 1)
    last = min(first + window - 1, total_pages)
    return range(first, last + 1)


def page_items(
    current_page: int, policy: WindowPolicy, total_pages: int
) -> List[Union[int, None]]:
    """
    Page numbers in rendering order, with None marking an ellipsis.

    Only an EllipsisWindow adds the first/last page and ellipsis slots
    around its range. A single hidden page is never replaced by an
    ellipsis: the range starting at page 2 gets page 1 without a gap.

    Example:
        >>> page_items(10, EllipsisWindow(5), 20)
        [1, None, 8, 9, 10, 11, 12, None, 20]
    """
    page_range = get_page_link_range(current_page, policy, total_pages)
    items: List[Union[int, None]] = list(page_range)

    if not isinstance(policy, EllipsisWindow) or not items:
        return items

    first, last = items[0], items[-1]

    if first > 1:
        prefix: List[Union[int, None]] = [1]
        if first > 2:
            prefix.append(ELLIPSIS)
        items = prefix + items

    if last < total_pages:
        if last < total_pages - 1:
            items.append(ELLIPSIS)
        items.append(total_pages)

    return items
