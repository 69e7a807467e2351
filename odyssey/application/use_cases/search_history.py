"""유즈케이스: 사용자별 최근 검색 기록."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from odyssey.domain.entities import SearchHistoryItem
from odyssey.domain.entities.post import utcnow
from odyssey.domain.exceptions import InvalidFilterError
from odyssey.domain.repositories.search_history_repository import SearchHistoryRepository

logger = logging.getLogger(__name__)


class SearchHistoryUseCase:
    def __init__(
        self,
        history_repo: SearchHistoryRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._repo = history_repo
        self._clock = clock

    async def save(self, user_id: str, query: str, type: str) -> SearchHistoryItem:
        """같은 (사용자, 검색어, 유형)이 이미 있으면 시각만 갱신한다."""
        query = query.strip()
        if not query:
            raise InvalidFilterError("빈 검색어는 기록하지 않습니다.")

        now = self._clock()
        item = SearchHistoryItem(user_id=user_id, query=query, type=type, timestamp=now)

        existing = await self._repo.find(user_id, query, type)
        if existing is not None:
            await self._repo.touch(existing.id, now)
            existing.timestamp = now
            return existing

        return await self._repo.save(item)

    async def recent(self, user_id: str, limit: int = 10) -> list[SearchHistoryItem]:
        return await self._repo.list_for_user(user_id, limit)

    async def clear(self, user_id: str) -> int:
        deleted = await self._repo.delete_for_user(user_id)
        logger.info(f"검색 기록 {deleted}건 삭제 (user={user_id})")
        return deleted

    async def delete(self, item_id: str) -> None:
        await self._repo.delete(item_id)
