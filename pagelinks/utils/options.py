"""
Option tree utilities - layered merging of pagination options.

Option trees are plain mappings whose values may themselves be mappings
(nested attribute groups such as `aria`). They are resolved in three layers:

1. Library defaults (PaginationOptions field defaults)
2. Process-wide settings (pagelinks.config.Settings)
3. Call-site overrides

Later layers win on leaves; nested mappings are merged recursively.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from pagelinks.config import Settings, settings
from pagelinks.schemas.options import PaginationOptions
from pagelinks.schemas.query import OrderSpec, QueryState

logger = logging.getLogger(__name__)

OptionTree = Dict[str, Any]


def deep_merge(a: Mapping[str, Any], b: Mapping[str, Any]) -> OptionTree:
    """
    Deep merge two option trees. Neither input is mutated.

    Example:
        >>> deep_merge({"aria": {"role": "navigation"}}, {"aria": {"label": "pagination"}})
        {'aria': {'role': 'navigation', 'label': 'pagination'}}
        >>> deep_merge({"class": "a"}, {"class": "b"})
        {'class': 'b'}
    """
    merged: OptionTree = dict(a)
    for key, value in b.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def is_empty(value: Any) -> bool:
    """None and empty collections count as unset."""
    return value is None or (isinstance(value, (list, tuple, dict, set)) and not value)


def maybe_put(
    params: Dict[str, Any], key: str, value: Any, default: Any = None
) -> Dict[str, Any]:
    """
    Put `value` under `key` only if it is not None or an empty collection,
    and does not equal `default`.

    Example:
        >>> maybe_put({}, "a", "b")
        {'a': 'b'}
        >>> maybe_put({}, "a", [])
        {}
        >>> maybe_put({}, "a", "a", "a")
        {}
    """
    if is_empty(value):
        return params
    if value == default:
        return params
    params[key] = value
    return params


def maybe_put_order_params(
    params: Dict[str, Any], query: QueryState, default_order: Optional[OrderSpec]
) -> Dict[str, Any]:
    """Put the ordering params of `query` unless they match the default order."""
    if (
        default_order is not None
        and query.order_by == default_order.order_by
        and query.order_directions == default_order.order_directions
    ):
        return params

    maybe_put(params, "order_by", query.order_by)
    maybe_put(params, "order_directions", query.order_directions)
    return params


def _as_tree(overrides: Union[Mapping[str, Any], BaseModel, None]) -> OptionTree:
    if overrides is None:
        return {}
    if isinstance(overrides, BaseModel):
        tree: OptionTree = {}
        for name in overrides.model_fields_set:
            value = getattr(overrides, name)
            if isinstance(value, BaseModel):
                value = value.model_dump(by_alias=True, exclude_unset=True)
            tree[name] = value
        return tree
    return dict(overrides)


def get_global_opts(config: Optional[Settings] = None) -> OptionTree:
    """
    Build the process-wide option layer from settings.

    Only settings that are actually configured end up in the tree, so the
    library defaults stay in effect for everything else.
    """
    config = config or settings
    tree: OptionTree = {}

    maybe_put(tree, "page_links", config.PAGINATION_PAGE_LINKS)
    if config.PAGINATION_LINK_ARIA_LABEL:
        template = config.PAGINATION_LINK_ARIA_LABEL
        tree["pagination_link_aria_label"] = lambda page: template.format(page=page)

    maybe_put(tree, "previous_link_content", config.PAGINATION_PREVIOUS_LINK_CONTENT)
    maybe_put(tree, "next_link_content", config.PAGINATION_NEXT_LINK_CONTENT)
    maybe_put(tree, "ellipsis_content", config.PAGINATION_ELLIPSIS_CONTENT)
    maybe_put(tree, "disabled_class", config.PAGINATION_DISABLED_CLASS)

    for option, value in (
        ("wrapper_attrs", config.PAGINATION_WRAPPER_CLASS),
        ("pagination_list_attrs", config.PAGINATION_LIST_CLASS),
        ("pagination_link_attrs", config.PAGINATION_LINK_CLASS),
        ("current_link_attrs", config.PAGINATION_CURRENT_LINK_CLASS),
    ):
        if value:
            tree[option] = {"class": value}

    logger.debug("Process-wide pagination options: %s", sorted(tree))
    return tree


def default_opts() -> OptionTree:
    return PaginationOptions().to_tree()


def merge_opts(
    overrides: Union[Mapping[str, Any], BaseModel, None] = None,
    global_opts: Optional[Mapping[str, Any]] = None,
) -> PaginationOptions:
    """
    Resolve the pagination options for one render.

    Args:
        overrides: Call-site option tree (or partial PaginationOptions)
        global_opts: Process-wide option tree; read from settings when omitted

    Returns:
        Validated PaginationOptions

    Raises:
        pydantic.ValidationError: If an override has an invalid value
    """
    if global_opts is None:
        global_opts = get_global_opts()

    merged = deep_merge(deep_merge(default_opts(), global_opts), _as_tree(overrides))
    return PaginationOptions.model_validate(merged)
