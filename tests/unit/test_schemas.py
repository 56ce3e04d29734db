"""
Unit tests for schema records.
"""

import pytest
from pydantic import ValidationError

from pagelinks.schemas.meta import PaginationMeta
from pagelinks.schemas.navigation import (
    ClientCommand,
    EllipsisWindow,
    Hide,
    ShowAll,
    parse_window_policy,
)
from pagelinks.schemas.options import LinkAttrs
from pagelinks.schemas.query import QueryState


class TestParseWindowPolicy:
    """Test window policy parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("all", ShowAll()),
            ("hide", Hide()),
            ("ellipsis:5", EllipsisWindow(5)),
            (" Ellipsis:3 ", EllipsisWindow(3)),
            (("ellipsis", 7), EllipsisWindow(7)),
            (Hide(), Hide()),
        ],
    )
    def test_valid_values(self, value, expected):
        assert parse_window_policy(value) == expected

    @pytest.mark.parametrize("value", ["ellipsis", "ellipsis:x", "all:2", 5, None])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            parse_window_policy(value)

    def test_window_must_be_positive(self):
        with pytest.raises(ValueError):
            EllipsisWindow(0)


class TestPaginationMeta:
    """Test metadata derivation from totals."""

    def test_from_totals(self):
        meta = PaginationMeta.from_totals(QueryState(page=2, page_size=10), 95)

        assert meta.current_page == 2
        assert meta.total_pages == 10
        assert meta.total_count == 95
        assert meta.has_previous_page is True
        assert meta.has_next_page is True
        assert meta.previous_page == 1
        assert meta.next_page == 3

    def test_offset_based_query(self):
        meta = PaginationMeta.from_totals(QueryState(offset=40, limit=20), 100)

        assert meta.current_page == 3
        assert meta.page_size == 20
        assert meta.total_pages == 5

    def test_default_limit(self):
        meta = PaginationMeta.from_totals(QueryState(), 45, default_limit=20)

        assert meta.current_page == 1
        assert meta.total_pages == 3
        assert meta.has_previous_page is False
        assert meta.previous_page is None

    def test_empty_result(self):
        meta = PaginationMeta.from_totals(QueryState(page=1, page_size=10), 0)

        assert meta.total_pages == 0
        assert meta.has_next_page is False
        assert meta.should_render is False

    def test_without_page_size(self):
        meta = PaginationMeta.from_totals(QueryState(), 12)

        assert meta.total_pages == 1
        assert meta.should_render is False

    def test_errors_prevent_rendering(self):
        meta = PaginationMeta(current_page=1, total_pages=5, errors=["invalid page"])
        assert meta.should_render is False

    def test_current_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            PaginationMeta(current_page=0, total_pages=5)

    def test_immutable(self):
        meta = PaginationMeta(current_page=1, total_pages=5)
        with pytest.raises(ValidationError):
            meta.current_page = 2


class TestClientCommand:
    def test_builder_returns_new_commands(self):
        base = ClientCommand()
        pushed = base.push("paginate", value={"page": 2})

        assert base.ops == ()
        assert pushed.to_json() == '[["push", {"event": "paginate", "value": {"page": 2}}]]'

    def test_navigate(self):
        command = ClientCommand().navigate("/pets", replace=True)
        assert str(command) == '[["navigate", {"href": "/pets", "replace": true}]]'


class TestLinkAttrs:
    def test_class_alias(self):
        attrs = LinkAttrs.model_validate({"class": "a", "id": "pager"})

        assert attrs.class_ == "a"
        assert attrs.to_tree() == {"class": "a", "id": "pager"}
