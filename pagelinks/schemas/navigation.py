"""
Navigation schemas - window policies, navigation targets and client commands.

Window policies decide how many page links are shown:
- ShowAll: a link for every page
- Hide: no page links (previous/next only)
- EllipsisWindow: at most `max_pages` links around the current page

Navigation targets describe how the address of a page link is built:
- RouteTemplate: a named route resolved through a Starlette/FastAPI router
- RouteFunction: a function called with extra positional args and the params
- StaticPath: a plain path, the params are appended as a query string
- PathFunction: a 1-argument function receiving the params
- NoPath: the link has no address and relies on a client command
"""

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Tuple, Union

from pydantic import Field

from pagelinks.schemas.base import BaseSchema


@dataclass(frozen=True)
class ShowAll:
    pass


@dataclass(frozen=True)
class Hide:
    pass


@dataclass(frozen=True)
class EllipsisWindow:
    max_pages: int

    def __post_init__(self):
        if self.max_pages < 1:
            raise ValueError("max_pages must be a positive integer")


WindowPolicy = Union[ShowAll, Hide, EllipsisWindow]


def parse_window_policy(value: Any) -> WindowPolicy:
    """
    Convert a configuration value to a window policy.

    Accepts policy instances, the strings "all", "hide" and
    "ellipsis:<n>", and ("ellipsis", n) pairs.

    Raises:
        ValueError: If the value cannot be interpreted
    """
    if isinstance(value, (ShowAll, Hide, EllipsisWindow)):
        return value

    if isinstance(value, str):
        name, _, arg = value.strip().lower().partition(":")
        if name == "all" and not arg:
            return ShowAll()
        if name == "hide" and not arg:
            return Hide()
        if name == "ellipsis" and arg.strip().isdigit():
            return EllipsisWindow(int(arg))

    if (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and value[0] == "ellipsis"
        and isinstance(value[1], int)
    ):
        return EllipsisWindow(value[1])

    raise ValueError(f"Invalid page_links value: {value!r}")


@dataclass(frozen=True)
class RouteTemplate:
    router: Any
    name: str
    path_params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RouteFunction:
    function: Callable[..., str]
    args: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class StaticPath:
    path: str


@dataclass(frozen=True)
class PathFunction:
    function: Callable[[Dict[str, Any]], str]


@dataclass(frozen=True)
class NoPath:
    pass


NavigationTarget = Union[RouteTemplate, RouteFunction, StaticPath, PathFunction, NoPath]


class ClientOp(BaseSchema):
    kind: str
    args: Dict[str, Any] = {}


class ClientCommand(BaseSchema):
    """
    Immutable chain of client-side operations.

    Every builder method returns a new command with the operation appended,
    so commands can be shared between links:

        >>> cmd = ClientCommand().dispatch("scroll-to", to="#my-table")
        >>> cmd.patch("/pets?page=2").to_json()
        '[["dispatch", {"event": "scroll-to", "to": "#my-table"}], ["patch", {"href": "/pets?page=2", "replace": false}]]'
    """

    ops: Tuple[ClientOp, ...] = Field(default_factory=tuple)

    def _append(self, kind: str, **args) -> "ClientCommand":
        return ClientCommand(ops=self.ops + (ClientOp(kind=kind, args=args),))

    def push(self, event: str, **opts) -> "ClientCommand":
        return self._append("push", event=event, **opts)

    def dispatch(self, event: str, **opts) -> "ClientCommand":
        return self._append("dispatch", event=event, **opts)

    def patch(self, href: str, replace: bool = False) -> "ClientCommand":
        return self._append("patch", href=href, replace=replace)

    def navigate(self, href: str, replace: bool = False) -> "ClientCommand":
        return self._append("navigate", href=href, replace=replace)

    def to_json(self) -> str:
        return json.dumps([[op.kind, op.args] for op in self.ops])

    def __str__(self) -> str:
        return self.to_json()
