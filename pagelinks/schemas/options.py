"""
Pagination option schemas.

Options are resolved from three layers (library defaults, process-wide
settings, call-site overrides) as plain option trees and validated into
these records once per render; see pagelinks.utils.options.merge_opts().
"""

from typing import Any, Callable, Dict, Optional

from pydantic import ConfigDict, Field, field_validator

from pagelinks.content import PAGINATION_CLASSES, PAGINATION_TEXTS
from pagelinks.schemas.base import BaseSchema
from pagelinks.schemas.navigation import ShowAll, WindowPolicy, parse_window_policy


def default_aria_label(page: int) -> str:
    return PAGINATION_TEXTS["aria_label"].format(page=page)


class AriaAttrs(BaseSchema):
    """ARIA attribute group, rendered as aria-* attributes."""

    model_config = ConfigDict(extra="allow")

    label: Optional[str] = None
    current: Optional[str] = None


class LinkAttrs(BaseSchema):
    """
    HTML attributes of one element. Unknown attributes are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    class_: Optional[str] = Field(None, alias="class")
    role: Optional[str] = None
    aria: Optional[AriaAttrs] = None

    def to_tree(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class PaginationOptions(BaseSchema):
    """
    Resolved pagination options. The field defaults are the library defaults.
    """

    page_links: WindowPolicy = ShowAll()
    pagination_link_aria_label: Callable[[int], str] = default_aria_label

    current_link_attrs: LinkAttrs = LinkAttrs(
        class_=PAGINATION_CLASSES["current"], aria=AriaAttrs(current="page")
    )
    pagination_link_attrs: LinkAttrs = LinkAttrs(class_=PAGINATION_CLASSES["link"])
    previous_link_attrs: LinkAttrs = LinkAttrs(
        class_=PAGINATION_CLASSES["previous"],
        aria=AriaAttrs(label=PAGINATION_TEXTS["aria_previous"]),
    )
    next_link_attrs: LinkAttrs = LinkAttrs(
        class_=PAGINATION_CLASSES["next"],
        aria=AriaAttrs(label=PAGINATION_TEXTS["aria_next"]),
    )
    ellipsis_attrs: LinkAttrs = LinkAttrs(class_=PAGINATION_CLASSES["ellipsis"])
    wrapper_attrs: LinkAttrs = LinkAttrs(
        class_=PAGINATION_CLASSES["wrapper"],
        role="navigation",
        aria=AriaAttrs(label=PAGINATION_TEXTS["aria_wrapper"]),
    )
    pagination_list_attrs: LinkAttrs = LinkAttrs(class_=PAGINATION_CLASSES["list"])

    disabled_class: str = PAGINATION_CLASSES["disabled"]
    previous_link_content: str = PAGINATION_TEXTS["previous"]
    next_link_content: str = PAGINATION_TEXTS["next"]
    ellipsis_content: str = PAGINATION_TEXTS["ellipsis"]

    @field_validator("page_links", mode="before")
    @classmethod
    def coerce_page_links(cls, v):
        return parse_window_policy(v)

    def to_tree(self) -> Dict[str, Any]:
        """Option tree of this record, nested attribute groups as dicts."""
        tree: Dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            tree[name] = value.to_tree() if isinstance(value, LinkAttrs) else value
        return tree
