"""
Query state schemas - the filter/sort/pagination descriptor of a listing.
"""

import enum
from typing import Any, List, Optional

from pydantic import Field

from pagelinks.schemas.base import BaseSchema


class OrderDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"
    ASC_NULLS_FIRST = "asc_nulls_first"
    ASC_NULLS_LAST = "asc_nulls_last"
    DESC_NULLS_FIRST = "desc_nulls_first"
    DESC_NULLS_LAST = "desc_nulls_last"


class FilterOp(str, enum.Enum):
    EQ = "=="
    NOT_EQ = "!="
    EMPTY = "empty"
    NOT_EMPTY = "not_empty"
    LT = "<"
    LTE = "<="
    GT = ">"
    GTE = ">="
    IN = "in"
    NOT_IN = "not_in"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    LIKE = "like"
    NOT_LIKE = "not_like"
    ILIKE = "ilike"
    SEARCH = "=~"


class Filter(BaseSchema):
    field: str
    op: FilterOp = FilterOp.EQ
    value: Any = None


class OrderSpec(BaseSchema):
    """Default ordering of a schema; ordering params equal to it are omitted from links."""

    order_by: Optional[List[str]] = None
    order_directions: Optional[List[OrderDirection]] = None


class QueryState(BaseSchema):
    """
    Filter, ordering and pagination parameters of a listing query.

    Offset-based (offset/limit), page-based (page/page_size) and
    cursor-based (first/after, last/before) fields coexist here; the
    pagination links only ever use the page-based pair, see
    pagelinks.utils.query_params.ensure_page_based_params().
    """

    after: Optional[str] = None
    before: Optional[str] = None
    first: Optional[int] = Field(None, ge=1)
    last: Optional[int] = Field(None, ge=1)
    limit: Optional[int] = Field(None, ge=1)
    offset: Optional[int] = Field(None, ge=0)
    page: Optional[int] = Field(None, ge=1)
    page_size: Optional[int] = Field(None, ge=1)
    order_by: Optional[List[str]] = None
    order_directions: Optional[List[OrderDirection]] = None
    filters: List[Filter] = []
