"""
Shared Jinja2 template filters for pagination controls.
"""

from typing import Any, Dict, Mapping

from pagelinks.schemas.navigation import ClientCommand

PREFIXED_GROUPS = ("aria", "data")


def html_attrs(attrs: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Flatten a nested attribute tree into HTML attributes.

    Nested aria/data groups become dashed attributes and their booleans
    become "true" or "false". Elsewhere None and False are dropped and True
    becomes an empty attribute value. Client commands are serialized to
    JSON. Escaping is left to the template (e.g. xmlattr).

    Example:
        >>> html_attrs({"class": "pagination", "aria": {"label": "pagination"}})
        {'class': 'pagination', 'aria-label': 'pagination'}
    """
    flat: Dict[str, Any] = {}
    for key, value in attrs.items():
        if key in PREFIXED_GROUPS and isinstance(value, Mapping):
            group = {
                sub_key: ("true" if sub_value else "false")
                if isinstance(sub_value, bool)
                else sub_value
                for sub_key, sub_value in value.items()
            }
            for sub_key, sub_value in html_attrs(group).items():
                flat[f"{key}-{sub_key}"] = sub_value
            continue
        if value is None or value is False:
            continue
        if value is True:
            value = ""
        elif isinstance(value, ClientCommand):
            value = value.to_json()
        flat[key.replace("_", "-")] = value
    return flat


def register_filters(templates):
    """
    Register the pagination filters and globals on a Jinja2Templates
    instance or a plain jinja2.Environment.

    Uso:
        from pagelinks.utils.template_filters import register_filters
        templates = Jinja2Templates(directory="templates")
        register_filters(templates)
    """
    from pagelinks.services.pagination_service import (
        attrs_for_page_link,
        build_pagination,
    )

    env = getattr(templates, "env", templates)
    env.filters["html_attrs"] = html_attrs
    env.globals["pagination"] = build_pagination
    env.globals["attrs_for_page_link"] = attrs_for_page_link
