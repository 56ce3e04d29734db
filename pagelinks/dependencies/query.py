"""
Query state dependency - parses listing parameters from the request.

The parameters are the ones written by the pagination links (see
pagelinks.utils.query_params.to_query), so a link followed by the browser
yields the same QueryState again.
"""

import logging
from typing import Any, Dict, List

from fastapi import HTTPException, Request, status
from pydantic import ValidationError

from pagelinks.schemas.query import QueryState
from pagelinks.utils.query_params import decode_query

logger = logging.getLogger(__name__)

QUERY_FIELDS = (
    "after",
    "before",
    "first",
    "last",
    "limit",
    "offset",
    "page",
    "page_size",
    "order_by",
    "order_directions",
)


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, dict):
        return [value[key] for key in sorted(value, key=_index_key)]
    return [value]


def _index_key(key: str):
    return (0, int(key)) if key.isdigit() else (1, key)


def parse_query_params(params: Dict[str, Any]) -> QueryState:
    """
    Build a QueryState from decoded query parameters.

    Raises:
        pydantic.ValidationError: If a parameter has an invalid value
    """
    data: Dict[str, Any] = {
        key: params[key] for key in QUERY_FIELDS if params.get(key) not in (None, "")
    }
    for key in ("order_by", "order_directions"):
        if key in data:
            data[key] = _as_list(data[key])
    if "filters" in params:
        data["filters"] = [
            f for f in _as_list(params["filters"]) if isinstance(f, dict)
        ]
    return QueryState.model_validate(data)


def get_query_state(request: Request) -> QueryState:
    """
    FastAPI dependency returning the QueryState of the current request.

    Uso:
        @router.get("/pets")
        async def list_pets(query: QueryState = Depends(get_query_state)):
            ...

    Raises:
        HTTPException: 400 if a parameter has an invalid value
    """
    params = decode_query(request.query_params.multi_items())
    try:
        return parse_query_params(params)
    except ValidationError as exc:
        logger.info("Invalid listing parameters on %s: %s", request.url.path, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid listing parameters",
        )
