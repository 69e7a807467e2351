"""유즈케이스: 통합 검색 (게시물 + 사용자 + 위치).

세 하위 검색을 동시에 실행하고 결과를 하나로 합친다.
각 하위 검색은 자기 오류를 스스로 처리해 빈 목록으로 대체하므로
한쪽이 실패해도 나머지는 끝까지 실행된다. 실패한 섹션은 SearchResult.errors에 남긴다.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Optional, TypeVar

from odyssey.domain.entities import LocationResult, Post, Profile, SearchFilters, SearchResult
from odyssey.domain.entities.post import utcnow
from odyssey.domain.entities.search import SORT_POPULAR, SORT_TRENDING
from odyssey.domain.repositories.post_repository import PostRepository
from odyssey.domain.repositories.profile_repository import ProfileRepository
from odyssey.domain.services.location_aggregator import group_location_results
from odyssey.domain.value_objects.post_query import ORDER_CREATED_AT, ORDER_LIKES, PostQuery

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SearchUseCase:
    def __init__(
        self,
        post_repo: PostRepository,
        profile_repo: ProfileRepository,
        post_limit: int = 20,
        user_limit: int = 20,
        location_limit: int = 10,
        trending_window_days: int = 7,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._post_repo = post_repo
        self._profile_repo = profile_repo
        self._post_limit = post_limit
        self._user_limit = user_limit
        self._location_limit = location_limit
        self._trending_window = timedelta(days=trending_window_days)
        self._clock = clock

    async def execute(self, query: str, filters: Optional[SearchFilters] = None) -> SearchResult:
        filters = filters or SearchFilters()
        errors: dict[str, str] = {}

        posts, users, locations = await asyncio.gather(
            self._soft("posts", self.search_posts(query, filters), errors),
            self._soft("users", self.search_users(query), errors),
            self._soft("locations", self.search_locations(query), errors),
        )

        if errors:
            logger.warning(f"검색 '{query}' 일부 섹션 실패: {', '.join(sorted(errors))}")
        return SearchResult(posts=posts, users=users, locations=locations, errors=errors)

    async def _soft(self, section: str, coro: Awaitable[list[T]], errors: dict[str, str]) -> list[T]:
        try:
            return await coro
        except Exception as e:
            logger.error(f"{section} 검색 오류: {e}")
            errors[section] = str(e)
            return []

    async def search_posts(self, query: str, filters: SearchFilters) -> list[Post]:
        """위치 이름/본문 검색 + 작성자/기간/정렬 필터."""
        user_id = None
        if filters.username:
            profile = await self._profile_repo.find_by_username(filters.username)
            if profile is None:
                # 해당 사용자가 없으면 게시물도 없다
                return []
            user_id = profile.id

        created_from = filters.date_from
        order_by = ORDER_CREATED_AT
        if filters.sort_by == SORT_POPULAR:
            order_by = ORDER_LIKES
        elif filters.sort_by == SORT_TRENDING:
            week_ago = self._clock() - self._trending_window
            created_from = max(created_from, week_ago) if created_from else week_ago
            order_by = ORDER_LIKES

        return await self._post_repo.query(
            PostQuery(
                text=filters.location or query or None,
                user_id=user_id,
                created_from=created_from,
                created_to=filters.date_to,
                order_by=order_by,
                limit=self._post_limit,
            )
        )

    async def search_users(self, query: str) -> list[Profile]:
        return await self._profile_repo.search(query, limit=self._user_limit)

    async def search_locations(self, query: str) -> list[LocationResult]:
        posts = await self._post_repo.query(
            PostQuery(has_location_name=True, location_name_contains=query or None)
        )
        return group_location_results(posts, limit=self._location_limit)
