"""
test_search_history.py — 최근 검색 기록 저장/갱신/삭제.
"""

from datetime import timedelta

import pytest

from odyssey.application.use_cases.search_history import SearchHistoryUseCase
from odyssey.domain.exceptions import InvalidFilterError
from tests.conftest import NOW


class Clock:
    def __init__(self):
        self.now = NOW

    def __call__(self):
        return self.now


@pytest.fixture()
def clock():
    return Clock()


@pytest.fixture()
def history(history_repo, clock):
    return SearchHistoryUseCase(history_repo, clock=clock)


class TestSearchHistory:

    async def test_save_and_list_newest_first(self, history, clock):
        await history.save("u1", "Paris", "location")
        clock.now = NOW + timedelta(minutes=5)
        await history.save("u1", "mehmet", "username")

        items = await history.recent("u1")
        assert [i.query for i in items] == ["mehmet", "Paris"]

    async def test_repeat_search_refreshes_timestamp(self, history, history_repo, clock):
        first = await history.save("u1", "Paris", "location")
        clock.now = NOW + timedelta(hours=1)
        again = await history.save("u1", "  Paris ", "location")

        assert again.id == first.id
        assert len(history_repo.items) == 1
        assert history_repo.items[first.id].timestamp == NOW + timedelta(hours=1)

    async def test_same_query_different_type_is_separate(self, history, history_repo):
        await history.save("u1", "beach", "tag")
        await history.save("u1", "beach", "location")
        assert len(history_repo.items) == 2

    async def test_invalid_type_rejected(self, history):
        with pytest.raises(InvalidFilterError):
            await history.save("u1", "Paris", "hashtag")

    async def test_blank_query_rejected(self, history):
        with pytest.raises(InvalidFilterError):
            await history.save("u1", "   ", "location")

    async def test_clear_only_affects_user(self, history):
        await history.save("u1", "Paris", "location")
        await history.save("u2", "Rome", "location")

        assert await history.clear("u1") == 1
        assert await history.recent("u1") == []
        assert len(await history.recent("u2")) == 1

    async def test_delete_single_item(self, history):
        item = await history.save("u1", "Paris", "location")
        await history.delete(item.id)
        assert await history.recent("u1") == []
