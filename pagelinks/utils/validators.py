"""
Validation utilities for pagination configuration.

This module contains:

1. **Path coercion**: conversion of the accepted raw path shapes into a
   NavigationTarget variant
2. **Mutual exclusivity checks**: path / event / on_paginate combinations

Both are meant to run once, when a pagination component is configured.
Failures raise PaginationConfigError; they are programming mistakes, not
runtime conditions, and are never caught here.

Accepted path shapes:
- "/pets" (plain string)
- (router, "route_name", {"param": value}) (named route of a Starlette router)
- (function, [arg, ...]) (called as function(arg, ..., params))
- function (1-argument function called with the params)
"""

import inspect
from typing import Any, Mapping, Optional

from pagelinks.content import PATH_ON_PAGINATE_ERROR_MSG, PATH_OR_EVENT_ERROR_MSG
from pagelinks.schemas.navigation import (
    ClientCommand,
    NavigationTarget,
    NoPath,
    PathFunction,
    RouteFunction,
    RouteTemplate,
    StaticPath,
)

_TARGET_TYPES = (RouteTemplate, RouteFunction, StaticPath, PathFunction, NoPath)


class PaginationConfigError(ValueError):
    """Raised when the navigation of a pagination component is misconfigured."""


def _is_unary(value: Any) -> bool:
    if not callable(value):
        return False
    try:
        inspect.signature(value).bind(None)
    except (TypeError, ValueError):
        return False
    return True


def coerce_path(
    path: Any, error_msg: str = PATH_ON_PAGINATE_ERROR_MSG
) -> NavigationTarget:
    """
    Convert a raw path value into a NavigationTarget.

    Args:
        path: NavigationTarget, None or one of the accepted raw shapes
        error_msg: Message of the error raised for unsupported shapes

    Returns:
        The matching NavigationTarget (NoPath for None)

    Raises:
        PaginationConfigError: If the value has an unsupported shape
    """
    if isinstance(path, _TARGET_TYPES):
        return path
    if path is None:
        return NoPath()
    if isinstance(path, str):
        return StaticPath(path)

    if isinstance(path, tuple) and len(path) == 3:
        router, name, params = path
        if (
            hasattr(router, "url_path_for")
            and isinstance(name, str)
            and isinstance(params, Mapping)
        ):
            return RouteTemplate(router, name, dict(params))

    if isinstance(path, tuple) and len(path) == 2:
        function, args = path
        if callable(function) and isinstance(args, (list, tuple)):
            return RouteFunction(function, tuple(args))

    if not isinstance(path, tuple) and _is_unary(path):
        return PathFunction(path)

    raise PaginationConfigError(error_msg)


def validate_path_or_event(
    path: Any, event: Optional[str], error_msg: str = PATH_OR_EVENT_ERROR_MSG
) -> NavigationTarget:
    """
    Validate that either a path in an accepted shape or an event is set,
    but not both.

    Returns:
        The coerced path (NoPath when the event is used)

    Raises:
        PaginationConfigError: If neither or both are set
    """
    target = coerce_path(path, error_msg)
    has_path = not isinstance(target, NoPath)
    has_event = isinstance(event, str)

    if has_path == has_event:
        raise PaginationConfigError(error_msg)
    return target


def validate_path_or_on_paginate(
    path: Any,
    on_paginate: Optional[ClientCommand] = None,
    event: Optional[str] = None,
    error_msg: str = PATH_ON_PAGINATE_ERROR_MSG,
) -> NavigationTarget:
    """
    Validate that a path, an on_paginate command or an event is set.

    A path and an on_paginate command may be combined: the command runs
    first, followed by a patch to the path. An event is a legacy mechanism
    and cannot be combined with either.

    Returns:
        The coerced path (NoPath when only a command or event is used)

    Raises:
        PaginationConfigError: If none is set, an event is combined with
            another mechanism, or the path has an unsupported shape
    """
    target = coerce_path(path, error_msg)
    has_path = not isinstance(target, NoPath)
    has_command = isinstance(on_paginate, ClientCommand)
    has_event = isinstance(event, str)

    if has_event and (has_path or has_command):
        raise PaginationConfigError(error_msg)
    if not (has_path or has_command or has_event):
        raise PaginationConfigError(error_msg)
    return target
