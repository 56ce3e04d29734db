import pytest

from pagelinks.schemas.meta import PaginationMeta
from pagelinks.schemas.query import QueryState


@pytest.fixture
def query():
    """Page-based query on page 5 with 10 rows per page."""
    return QueryState(page=5, page_size=10)


@pytest.fixture
def meta(query):
    """Metadata of page 5 of 20."""
    return PaginationMeta.from_totals(query, total_count=200)


@pytest.fixture
def no_global_opts():
    """Empty process-wide option layer, independent of the environment."""
    return {}
