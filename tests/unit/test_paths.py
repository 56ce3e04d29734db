"""
Unit tests for link addresses and client commands.
"""

import json

import pytest
from fastapi import APIRouter

from pagelinks.schemas.meta import PaginationMeta
from pagelinks.schemas.navigation import (
    ClientCommand,
    NoPath,
    PathFunction,
    RouteFunction,
    RouteTemplate,
    StaticPath,
)
from pagelinks.schemas.query import OrderSpec, QueryState
from pagelinks.utils.paths import build_page_link_helper, build_path, click_cmd


@pytest.fixture
def router():
    router = APIRouter()

    @router.get("/owners/{owner_id}/pets", name="owner_pets")
    async def owner_pets(owner_id: int):
        return []

    return router


class TestBuildPath:
    """Test build_path for every navigation target."""

    def test_static_path(self):
        assert build_path(StaticPath("/pets"), {"page": 2}) == "/pets?page=2"

    def test_static_path_without_params(self):
        assert build_path(StaticPath("/pets"), {}) == "/pets"

    def test_static_path_merges_existing_query(self):
        result = build_path(StaticPath("/pets?species=dog&page=4"), {"page_size": 10})
        assert result == "/pets?species=dog&page_size=10"

    def test_raw_string_path(self):
        assert build_path("/pets", {"order_by": ["name"]}) == "/pets?order_by[]=name"

    def test_path_function(self):
        target = PathFunction(lambda params: f"/pets/page/{params.get('page', 1)}")
        assert build_path(target, {"page": 3}) == "/pets/page/3"

    def test_route_function(self):
        def pet_path(scope, action, params):
            return f"/{scope}/{action}?page={params['page']}"

        target = RouteFunction(pet_path, ("pets", "index"))
        assert build_path(target, {"page": 2}) == "/pets/index?page=2"

    def test_route_template(self, router):
        target = RouteTemplate(router, "owner_pets", {"owner_id": 7})
        assert build_path(target, {"page": 2}) == "/owners/7/pets?page=2"

    def test_no_path(self):
        assert build_path(NoPath(), {"page": 2}) is None
        assert build_path(None, {"page": 2}) is None


class TestBuildPageLinkHelper:
    """Test the per-page address helper."""

    def test_first_page_has_no_page_param(self, meta):
        page_link = build_page_link_helper(meta, "/pets")
        assert page_link(1) == "/pets?page_size=10"

    def test_other_pages_have_page_param(self, meta):
        page_link = build_page_link_helper(meta, "/pets")
        assert page_link(5) == "/pets?page=5&page_size=10"

    def test_params_are_normalized_to_pages(self):
        meta = PaginationMeta.from_totals(QueryState(offset=20, limit=10), 100)
        page_link = build_page_link_helper(meta, "/pets")

        assert page_link(2) == "/pets?page_size=10&page=2"
        assert page_link(1) == "/pets?page_size=10"

    def test_defaults_are_omitted(self):
        query = QueryState(
            page=2,
            page_size=25,
            order_by=["name"],
            order_directions=["asc"],
        )
        meta = PaginationMeta.from_totals(
            query,
            100,
            default_limit=25,
            default_order=OrderSpec(order_by=["name"], order_directions=["asc"]),
        )
        page_link = build_page_link_helper(meta, "/pets")

        assert page_link(1) == "/pets"
        assert page_link(3) == "/pets?page=3"

    def test_order_and_filters_are_preserved(self):
        query = QueryState(
            page=1,
            page_size=10,
            order_by=["age"],
            order_directions=["desc"],
            filters=[{"field": "name", "op": "=~", "value": "rex"}],
        )
        meta = PaginationMeta.from_totals(query, 100)
        page_link = build_page_link_helper(meta, "/pets")

        assert page_link(4) == (
            "/pets?page=4&page_size=10&order_by[]=age&order_directions[]=desc"
            "&filters[0][field]=name&filters[0][op]=%3D~&filters[0][value]=rex"
        )

    def test_listing_params_of_the_base_path_are_replaced(self):
        query = QueryState(page=3, page_size=10, order_by=["name"])
        default_order = OrderSpec(order_by=["name"])
        meta = PaginationMeta.from_totals(query, 100, default_order=default_order)
        page_link = build_page_link_helper(
            meta, "/pets?order_by[]=age&filters[0][field]=name&species=dog#top"
        )

        assert page_link(3) == "/pets?species=dog&page=3&page_size=10#top"

    def test_without_target(self, meta):
        page_link = build_page_link_helper(meta, None)
        assert page_link(2) is None

    def test_path_function_receives_params(self, meta):
        received = []

        def build(params):
            received.append(params)
            return "/custom"

        page_link = build_page_link_helper(meta, build)
        page_link(1)
        page_link(3)

        assert received == [{"page_size": 10}, {"page": 3, "page_size": 10}]


class TestClickCmd:
    """Test composition of client commands with a patch."""

    def test_without_path(self):
        command = ClientCommand().push("paginate")
        assert click_cmd(command, None) is command

    def test_command_then_patch(self):
        command = ClientCommand().dispatch("scroll-to", to="#my-table")
        result = click_cmd(command, "/pets?page=2")

        assert json.loads(result.to_json()) == [
            ["dispatch", {"event": "scroll-to", "to": "#my-table"}],
            ["patch", {"href": "/pets?page=2", "replace": False}],
        ]
        assert len(command.ops) == 1

    def test_patch_only(self):
        result = click_cmd(None, "/pets?page=2")
        assert [op.kind for op in result.ops] == ["patch"]

    def test_nothing(self):
        assert click_cmd(None, None) is None
