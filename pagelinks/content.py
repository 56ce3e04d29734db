# pagelinks - Content Configuration
# Default texts, labels and messages used by the pagination helpers

PAGINATION_TEXTS = {
    "previous": "Previous",
    "next": "Next",
    "ellipsis": "&hellip;",
    "aria_label": "Go to page {page}",
    "aria_previous": "Go to previous page",
    "aria_next": "Go to next page",
    "aria_wrapper": "pagination",
}

PAGINATION_CLASSES = {
    "wrapper": "pagination",
    "list": "pagination-list",
    "link": "pagination-link",
    "current": "pagination-link is-current",
    "previous": "pagination-previous",
    "next": "pagination-next",
    "ellipsis": "pagination-ellipsis",
    "disabled": "disabled",
}

PATH_ON_PAGINATE_ERROR_MSG = """\
path or on_paginate attribute is required

At least one of the mentioned attributes is required for the pagination
component. Combining them will append a patch command to the on_paginate
command.

The path value can be a path as a string, a (router, route_name, path_params)
tuple, a (function, args) tuple, or a 1-ary function.

Examples

    build_pagination(meta, path="/pets")

or

    build_pagination(meta, path=(app.router, "pet_index", {}))

or

    build_pagination(meta, path=(pet_path, [request, "index"]))

or

    build_pagination(meta, path=build_path)

or

    build_pagination(meta, on_paginate=ClientCommand().push("paginate"))

or

    build_pagination(
        meta,
        path=build_path,
        on_paginate=ClientCommand().dispatch("scroll-to", to="#my-table"),
    )
"""

PATH_OR_EVENT_ERROR_MSG = """\
path or event attribute is required, but not both

Exactly one of the mentioned attributes must be set. The path value can be a
path as a string, a (router, route_name, path_params) tuple, a
(function, args) tuple, or a 1-ary function.

Examples

    build_pagination(meta, path="/pets")

or

    build_pagination(meta, event="paginate")
"""
