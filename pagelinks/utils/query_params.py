"""
Query parameter utilities - QueryState to link parameters and back.

Functions:
- ensure_page_based_params: normalize a QueryState to page/page_size
- to_query: flatten a QueryState into link parameters, omitting defaults
- encode_query: encode parameters with bracket notation for nested values
- decode_query: parse bracket-notation query pairs into nested parameters
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import urlencode

from pagelinks.schemas.query import OrderSpec, QueryState
from pagelinks.utils.options import is_empty, maybe_put, maybe_put_order_params
from pagelinks.utils.template_helpers import convert_enums_to_values


def ensure_page_based_params(query: QueryState) -> QueryState:
    """
    Ensure that the only pagination parameters set are page and page_size.

    Offset, limit and cursor fields are cleared; a limit becomes the page
    size when no page size is set.

    Example:
        >>> query = ensure_page_based_params(QueryState(limit=2, offset=4))
        >>> query.limit, query.offset, query.page, query.page_size
        (None, None, None, 2)
    """
    return query.model_copy(
        update={
            "after": None,
            "before": None,
            "first": None,
            "last": None,
            "limit": None,
            "offset": None,
            "page_size": query.page_size or query.limit,
            "page": query.page,
        }
    )


def to_query(
    query: QueryState,
    default_limit: Optional[int] = None,
    default_order: Optional[OrderSpec] = None,
) -> Dict[str, Any]:
    """
    Convert a QueryState into link parameters.

    Empty values are omitted, as are page sizes equal to `default_limit`
    and ordering equal to `default_order`. Filters without a value (None or
    an empty collection) are skipped; the remaining ones are keyed by their
    index.

    Example:
        >>> to_query(QueryState(page=3, page_size=20, order_by=["name"]), default_limit=20)
        {'page': 3, 'order_by': ['name']}
    """
    filters = {
        str(index): {"field": f.field, "op": f.op, "value": f.value}
        for index, f in enumerate(f for f in query.filters if not is_empty(f.value))
    }

    params: Dict[str, Any] = {}
    maybe_put(params, "offset", query.offset)
    maybe_put(params, "page", query.page)
    maybe_put(params, "after", query.after)
    maybe_put(params, "before", query.before)
    maybe_put(params, "page_size", query.page_size, default_limit)
    maybe_put(params, "limit", query.limit, default_limit)
    maybe_put(params, "first", query.first, default_limit)
    maybe_put(params, "last", query.last, default_limit)
    maybe_put_order_params(params, query, default_order)
    maybe_put(params, "filters", filters)

    return convert_enums_to_values(params)


def _flatten(prefix: str, value: Any) -> Iterable[Tuple[str, Any]]:
    if isinstance(value, dict):
        for key, item in value.items():
            yield from _flatten(f"{prefix}[{key}]", item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten(f"{prefix}[]", item)
    elif isinstance(value, bool):
        yield prefix, "true" if value else "false"
    else:
        yield prefix, value


def encode_query(params: Dict[str, Any]) -> str:
    """
    Encode parameters as a query string.

    Example:
        >>> encode_query({"page": 2, "order_by": ["name", "age"]})
        'page=2&order_by[]=name&order_by[]=age'
    """
    pairs: List[Tuple[str, Any]] = []
    for key, value in params.items():
        pairs.extend(_flatten(key, value))
    return urlencode(pairs, safe="[]")


def _split_key(key: str) -> List[str]:
    head, _, rest = key.partition("[")
    parts = [head]
    while rest:
        part, _, rest = rest.partition("]")
        parts.append(part)
        rest = rest[1:] if rest.startswith("[") else ""
    return parts


def decode_query(pairs: Iterable[Tuple[str, str]]) -> Dict[str, Any]:
    """
    Parse bracket-notation query pairs into nested parameters.

    `key[]` collects a list, `key[sub]` a mapping.

    Example:
        >>> decode_query([("order_by[]", "name"), ("filters[0][field]", "age")])
        {'order_by': ['name'], 'filters': {'0': {'field': 'age'}}}
    """
    params: Dict[str, Any] = {}
    for key, value in pairs:
        parts = _split_key(key)
        target = params
        for index, part in enumerate(parts[:-1]):
            if not isinstance(target, dict):
                break
            container: Any = [] if parts[index + 1] == "" else {}
            target = target.setdefault(part, container)
        else:
            last = parts[-1]
            if last == "" and isinstance(target, list):
                target.append(value)
            elif isinstance(target, dict):
                target[last] = value
    return params
