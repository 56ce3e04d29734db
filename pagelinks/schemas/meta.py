"""
Pagination metadata - the state of a paginated result set.
"""

from typing import List, Optional

from pydantic import Field

from pagelinks.schemas.base import BaseSchema
from pagelinks.schemas.query import OrderSpec, QueryState
from pagelinks.utils.pagination import calculate_pagination


class PaginationMeta(BaseSchema):
    """
    Read-only metadata of one page of a query result.

    `current_page <= total_pages` is expected but not enforced; the link
    helpers produce degenerate output for inconsistent metadata instead of
    failing.
    """

    current_page: int = Field(1, ge=1)
    total_pages: int = Field(0, ge=0)
    page_size: Optional[int] = Field(None, ge=1)
    total_count: Optional[int] = Field(None, ge=0)
    has_previous_page: bool = False
    has_next_page: bool = False
    previous_page: Optional[int] = None
    next_page: Optional[int] = None

    query: QueryState = QueryState()
    default_limit: Optional[int] = None
    default_order: Optional[OrderSpec] = None
    errors: List[str] = []

    @property
    def should_render(self) -> bool:
        """Pagination controls are only shown for valid, multi-page results."""
        return not self.errors and self.total_pages > 1

    @classmethod
    def from_totals(
        cls,
        query: QueryState,
        total_count: int,
        default_limit: Optional[int] = None,
        default_order: Optional[OrderSpec] = None,
    ) -> "PaginationMeta":
        """
        Build the metadata for `query` from the total row count.

        The page size is taken from `page_size`, then `limit`, then
        `default_limit`. For offset-based queries the current page is
        derived from the offset.

        Example:
            >>> meta = PaginationMeta.from_totals(QueryState(page=2, page_size=10), 95)
            >>> meta.total_pages, meta.has_next_page
            (10, True)
        """
        page_size = query.page_size or query.limit or default_limit

        if page_size is None:
            return cls(
                current_page=1,
                total_pages=1 if total_count > 0 else 0,
                total_count=total_count,
                query=query,
                default_limit=default_limit,
                default_order=default_order,
            )

        if query.page is not None:
            page = query.page
        elif query.offset is not None:
            page = query.offset // page_size + 1
        else:
            page = 1

        pagination = calculate_pagination(page, page_size, total_count)
        total_pages = pagination["total_pages"]
        has_previous_page = page > 1
        has_next_page = page < total_pages

        return cls(
            current_page=page,
            total_pages=total_pages,
            page_size=page_size,
            total_count=total_count,
            has_previous_page=has_previous_page,
            has_next_page=has_next_page,
            previous_page=page - 1 if has_previous_page else None,
            next_page=page + 1 if has_next_page else None,
            query=query,
            default_limit=default_limit,
            default_order=default_order,
        )
