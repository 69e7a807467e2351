"""
test_search_use_case.py — 통합 검색 팬아웃, 필터, 부분 실패 처리.
"""

from datetime import timedelta

import pytest

from odyssey.application.use_cases.search import SearchUseCase
from odyssey.domain.entities import SearchFilters
from odyssey.domain.exceptions import InvalidFilterError
from odyssey.domain.value_objects.post_query import ORDER_CREATED_AT, ORDER_LIKES
from tests.conftest import NOW, make_post
from tests.fakes import InMemoryPostRepository, InMemoryProfileRepository


def use_case(post_repo, profile_repo) -> SearchUseCase:
    return SearchUseCase(post_repo, profile_repo, clock=lambda: NOW)


class TestSearchFanOut:

    async def test_combines_three_sections(self, profile_repo):
        repo = InMemoryPostRepository([
            make_post(location_name="Ayvalık, Turkey", content="sunset"),
            make_post(location_name="Paris, France"),
        ])
        result = await use_case(repo, profile_repo).execute("ay")

        assert [p.location_name for p in result.posts] == ["Ayvalık, Turkey"]
        assert {u.username for u in result.users} == {"ayse", "ayse_travels"}
        assert [loc.name for loc in result.locations] == ["Ayvalık, Turkey"]
        assert result.errors == {}
        assert not result.is_partial

    async def test_failed_posts_section_does_not_block_others(self, profile_repo):
        result = await use_case(InMemoryPostRepository(fail=True), profile_repo).execute("ayse")

        assert result.posts == []
        assert result.locations == []
        assert len(result.users) == 2
        assert set(result.errors) == {"posts", "locations"}
        assert result.is_partial

    async def test_failed_users_section(self):
        repo = InMemoryPostRepository([make_post(location_name="Rome, Italy")])
        result = await use_case(repo, InMemoryProfileRepository(fail=True)).execute("rome")

        assert result.users == []
        assert len(result.posts) == 1
        assert set(result.errors) == {"users"}

    async def test_result_caps(self, profile_repo):
        repo = InMemoryPostRepository(
            [make_post(location_name=f"Spot {i}, Turkey") for i in range(30)]
        )
        result = await use_case(repo, profile_repo).execute("turkey")
        assert len(result.posts) == 20
        assert len(result.locations) == 10


class TestPostFilters:

    async def test_default_sort_is_recent(self, profile_repo):
        old = make_post(content="kebab", days_ago=3, likes=50)
        new = make_post(content="kebab", days_ago=1, likes=1)
        repo = InMemoryPostRepository([old, new])
        posts = await use_case(repo, profile_repo).search_posts("kebab", SearchFilters())
        assert posts == [new, old]
        assert repo.queries[-1].order_by == ORDER_CREATED_AT

    async def test_popular_orders_by_likes(self, profile_repo):
        low = make_post(content="x", likes=2)
        high = make_post(content="x", days_ago=30, likes=9)
        repo = InMemoryPostRepository([low, high])
        posts = await use_case(repo, profile_repo).search_posts(
            "x", SearchFilters(sort_by="popular")
        )
        assert posts == [high, low]

    async def test_trending_restricts_to_last_week(self, profile_repo):
        recent = make_post(content="x", days_ago=2, likes=1)
        stale = make_post(content="x", days_ago=10, likes=100)
        repo = InMemoryPostRepository([recent, stale])
        posts = await use_case(repo, profile_repo).search_posts(
            "x", SearchFilters(sort_by="trending")
        )
        assert posts == [recent]
        query = repo.queries[-1]
        assert query.order_by == ORDER_LIKES
        assert query.created_from == NOW - timedelta(days=7)

    async def test_username_restricts_author(self, profile_repo):
        mine = make_post(content="x", user_id="u2")
        other = make_post(content="x", user_id="u1")
        repo = InMemoryPostRepository([mine, other])
        posts = await use_case(repo, profile_repo).search_posts(
            "x", SearchFilters(username="MEHMET")
        )
        assert posts == [mine]

    async def test_exact_username_preferred(self, profile_repo):
        repo = InMemoryPostRepository([make_post(user_id="u1"), make_post(user_id="u3")])
        posts = await use_case(repo, profile_repo).search_posts(
            "", SearchFilters(username="ayse")
        )
        assert {p.user_id for p in posts} == {"u1"}

    async def test_unknown_username_yields_no_posts(self, profile_repo):
        repo = InMemoryPostRepository([make_post(content="x")])
        posts = await use_case(repo, profile_repo).search_posts(
            "x", SearchFilters(username="nobody")
        )
        assert posts == []
        assert repo.queries == []

    async def test_date_bounds_inclusive(self, profile_repo):
        edge = make_post(days_ago=5)
        inside = make_post(days_ago=3)
        outside = make_post(days_ago=9)
        repo = InMemoryPostRepository([edge, inside, outside])
        filters = SearchFilters(date_from=NOW - timedelta(days=5), date_to=NOW - timedelta(days=3))
        posts = await use_case(repo, profile_repo).search_posts("", filters)
        assert posts == [inside, edge]

    async def test_location_filter_overrides_query(self, profile_repo):
        istanbul = make_post(location_name="Istanbul, Turkey", content="food")
        repo = InMemoryPostRepository([istanbul, make_post(content="food")])
        posts = await use_case(repo, profile_repo).search_posts(
            "food", SearchFilters(location="istanbul")
        )
        assert posts == [istanbul]


class TestSearchFilters:

    def test_unknown_sort_rejected(self):
        with pytest.raises(InvalidFilterError):
            SearchFilters(sort_by="random")

    def test_naive_dates_become_utc(self):
        filters = SearchFilters(date_from=NOW.replace(tzinfo=None))
        assert filters.date_from == NOW
