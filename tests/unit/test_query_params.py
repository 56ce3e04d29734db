"""
Unit tests for query state normalization and serialization.
"""

from pagelinks.schemas.query import Filter, OrderSpec, QueryState
from pagelinks.utils.query_params import (
    decode_query,
    encode_query,
    ensure_page_based_params,
    to_query,
)


class TestEnsurePageBasedParams:
    """Test normalization to page-based parameters."""

    def test_limit_becomes_page_size(self):
        result = ensure_page_based_params(QueryState(limit=2))

        assert result.limit is None
        assert result.offset is None
        assert result.page is None
        assert result.page_size == 2

    def test_page_size_takes_precedence_over_limit(self):
        result = ensure_page_based_params(QueryState(page=3, page_size=20, limit=50))

        assert result.page == 3
        assert result.page_size == 20
        assert result.limit is None

    def test_offset_and_cursor_fields_are_cleared(self):
        query = QueryState(
            offset=40, limit=20, first=10, last=5, after="abc", before="def"
        )
        result = ensure_page_based_params(query)

        assert (result.after, result.before, result.first, result.last) == (
            None,
            None,
            None,
            None,
        )
        assert result.offset is None
        assert result.page_size == 20

    def test_filters_and_order_are_kept(self):
        query = QueryState(
            limit=5,
            order_by=["name"],
            order_directions=["desc"],
            filters=[Filter(field="name", op="=~", value="rex")],
        )
        result = ensure_page_based_params(query)

        assert result.order_by == ["name"]
        assert result.order_directions == ["desc"]
        assert result.filters == query.filters

    def test_idempotent(self):
        query = QueryState(offset=10, limit=5, page=2, after="x", order_by=["age"])
        once = ensure_page_based_params(query)
        assert ensure_page_based_params(once) == once

    def test_input_is_not_modified(self):
        query = QueryState(offset=10, limit=5)
        ensure_page_based_params(query)
        assert query.offset == 10
        assert query.limit == 5


class TestToQuery:
    """Test conversion of a QueryState into link parameters."""

    def test_empty_query(self):
        assert to_query(QueryState()) == {}

    def test_pagination_params(self):
        assert to_query(QueryState(page=3, page_size=20)) == {"page": 3, "page_size": 20}

    def test_page_size_equal_to_default_limit_is_omitted(self):
        query = QueryState(page=3, page_size=20)
        assert to_query(query, default_limit=20) == {"page": 3}

    def test_order_params(self):
        query = QueryState(order_by=["name", "age"], order_directions=["asc", "desc"])
        assert to_query(query) == {
            "order_by": ["name", "age"],
            "order_directions": ["asc", "desc"],
        }

    def test_default_order_is_omitted(self):
        query = QueryState(order_by=["name"], order_directions=["asc"])
        default_order = OrderSpec(order_by=["name"], order_directions=["asc"])
        assert to_query(query, default_order=default_order) == {}

    def test_filters_without_value_are_skipped(self):
        query = QueryState(
            filters=[
                Filter(field="name", op="=~", value="rex"),
                Filter(field="age", op=">="),
                Filter(field="tags", op="in", value=[]),
                Filter(field="owner", value={}),
                Filter(field="species", value="dog"),
            ]
        )
        assert to_query(query) == {
            "filters": {
                "0": {"field": "name", "op": "=~", "value": "rex"},
                "1": {"field": "species", "op": "==", "value": "dog"},
            }
        }

    def test_filters_all_empty_are_omitted(self):
        query = QueryState(filters=[Filter(field="age", op=">=")])
        assert to_query(query) == {}


class TestEncodeQuery:
    """Test query string encoding."""

    def test_scalars(self):
        assert encode_query({"page": 2, "page_size": 10}) == "page=2&page_size=10"

    def test_lists_use_brackets(self):
        assert (
            encode_query({"order_by": ["name", "age"]})
            == "order_by[]=name&order_by[]=age"
        )

    def test_nested_mappings(self):
        params = {"filters": {"0": {"field": "name", "op": "=~", "value": "a b"}}}
        assert (
            encode_query(params)
            == "filters[0][field]=name&filters[0][op]=%3D~&filters[0][value]=a+b"
        )

    def test_empty(self):
        assert encode_query({}) == ""


class TestDecodeQuery:
    """Test query pair decoding."""

    def test_scalars_lists_and_mappings(self):
        pairs = [
            ("page", "2"),
            ("order_by[]", "name"),
            ("order_by[]", "age"),
            ("filters[0][field]", "name"),
            ("filters[0][value]", "rex"),
        ]
        assert decode_query(pairs) == {
            "page": "2",
            "order_by": ["name", "age"],
            "filters": {"0": {"field": "name", "value": "rex"}},
        }

    def test_conflicting_shapes_are_ignored(self):
        assert decode_query([("page", "2"), ("page[]", "3")]) == {"page": "2"}
