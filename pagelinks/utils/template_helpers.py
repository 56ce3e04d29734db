"""
Template Helper Functions for pagination controls.

Provides the glue between route handlers and pagination templates.
"""

from typing import Any, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from pagelinks.schemas.meta import PaginationMeta


def render_template(
    templates: Jinja2Templates,
    request: Request,
    template_name: str,
    context: dict,
    meta: Optional[PaginationMeta] = None,
    **pagination_kwargs: Any,
):
    """
    Render a template, adding the pagination view of `meta` as "pagination".

    Args:
        templates: Jinja2Templates instance (see template_config.get_templates)
        request: FastAPI request object
        template_name: Template to render
        context: Template variables
        meta: Optional pagination metadata of the listed results
        **pagination_kwargs: path, on_paginate, event and opts for
            build_pagination()
    """
    common_context = {}

    if meta is not None:
        common_context.update(get_pagination_context(meta, **pagination_kwargs))

    common_context.update(context)

    # Remove "request" from context since it's passed as first argument in new signature
    common_context.pop("request", None)

    return templates.TemplateResponse(request, template_name, common_context)


def get_pagination_context(meta: PaginationMeta, **pagination_kwargs: Any) -> dict:
    """
    Build the template variables of a paginated listing.

    Returns:
        Dictionary with "meta" and the built "pagination" view
    """
    from pagelinks.services.pagination_service import build_pagination

    return {
        "meta": meta,
        "pagination": build_pagination(meta, **pagination_kwargs),
    }


def convert_enums_to_values(obj: Any) -> Any:
    """
    Recursively convert enum objects to their string values for templates.

    This ensures that enum values can be properly serialized into query
    strings and used in Jinja2 templates without needing to call .value
    everywhere.

    Args:
        obj: Any object (dict, list, enum, primitive)

    Returns:
        Object with all enums converted to their string values
    """
    if isinstance(obj, dict):
        return {k: convert_enums_to_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [convert_enums_to_values(item) for item in obj]
    if hasattr(obj, "value"):  # Enum
        return obj.value
    return obj
