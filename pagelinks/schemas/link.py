from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from pagelinks.schemas.base import BaseSchema
from pagelinks.schemas.navigation import ClientCommand


class PageLink(BaseSchema):
    """
    Everything the rendering layer needs for one pagination link.

    `path` is the address of the link (None when navigation relies on the
    client command only), `command` the client command to run on click and
    `event` the name of a legacy click event carrying the page number.
    """

    page_number: Optional[int] = None
    is_current: bool = False
    disabled: bool = False
    attributes: Dict[str, Any] = {}
    content: Optional[str] = None
    path: Optional[str] = None
    command: Optional[ClientCommand] = None
    event: Optional[str] = None
    is_ellipsis: bool = False


class EllipsisMarker(BaseSchema):
    attributes: Dict[str, Any] = {}
    content: str = ""
    is_ellipsis: bool = True


PageItem = Union[PageLink, EllipsisMarker]


class PaginationView(BaseSchema):
    """Complete set of pagination controls for one result page."""

    wrapper_attrs: Dict[str, Any] = {}
    list_attrs: Dict[str, Any] = {}
    previous_link: PageLink
    next_link: PageLink
    items: List[PageItem] = Field(default_factory=list)
    page_range: List[int] = Field(default_factory=list)
    has_previous_page: bool = False
    has_next_page: bool = False
    should_render: bool = False
