from __future__ import annotations

from datetime import datetime
from typing import Protocol

from odyssey.domain.entities import SearchHistoryItem


class SearchHistoryRepository(Protocol):
    """검색 기록 저장소 인터페이스."""

    async def find(self, user_id: str, query: str, type: str) -> SearchHistoryItem | None: ...

    async def save(self, item: SearchHistoryItem) -> SearchHistoryItem: ...

    async def touch(self, item_id: str, timestamp: datetime) -> None:
        """기존 기록의 timestamp만 갱신."""
        ...

    async def list_for_user(self, user_id: str, limit: int = 10) -> list[SearchHistoryItem]:
        """최신순 조회."""
        ...

    async def delete_for_user(self, user_id: str) -> int: ...

    async def delete(self, item_id: str) -> None: ...
