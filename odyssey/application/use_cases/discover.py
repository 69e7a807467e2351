"""유즈케이스: 탐색(Discover) 탭 데이터.

트렌드 위치, 인기 여행지, 추천 장소, 인기 게시물, 추천 사용자,
카테고리/위치별 게시물 목록을 제공한다. 백엔드 오류는 호출자에게 전달된다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from odyssey.domain.entities import (
    TRAVEL_CATEGORIES,
    PopularDestination,
    Post,
    Profile,
    RecommendedPlace,
    TrendingLocation,
)
from odyssey.domain.entities.post import utcnow
from odyssey.domain.exceptions import InvalidFilterError
from odyssey.domain.repositories.post_repository import PostRepository
from odyssey.domain.repositories.profile_repository import ProfileRepository
from odyssey.domain.services.location_aggregator import aggregate_by_location_name, recommend_places
from odyssey.domain.services.trend_scorer import score_trending_locations
from odyssey.domain.value_objects.post_query import (
    ORDER_CREATED_AT,
    ORDER_LIKES,
    PostQuery,
    check_limit,
)

logger = logging.getLogger(__name__)


class DiscoverUseCase:
    def __init__(
        self,
        post_repo: PostRepository,
        profile_repo: ProfileRepository,
        trend_window_days: int = 7,
        page_size: int = 20,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._post_repo = post_repo
        self._profile_repo = profile_repo
        self._trend_window_days = trend_window_days
        self._page_size = page_size
        self._clock = clock

    def _window_start(self) -> datetime:
        return self._clock() - timedelta(days=self._trend_window_days)

    def _size(self, page_size: Optional[int]) -> int:
        return self._page_size if page_size is None else page_size

    # ─── 위치 집계 ───

    async def get_trending_locations(self, limit: int = 10) -> list[TrendingLocation]:
        """최근 기간 동안 게시물이 몰린 위치. 최근 게시물일수록 가중치가 크다."""
        now = self._clock()
        posts = await self._post_repo.query(
            PostQuery(
                has_location_name=True,
                created_from=now - timedelta(days=self._trend_window_days),
            )
        )
        trending = score_trending_locations(
            posts, window_days=self._trend_window_days, limit=limit, now=now
        )
        logger.info(f"트렌드 위치 {len(trending)}곳 계산 (게시물 {len(posts)}건)")
        return trending

    async def get_popular_destinations(self, limit: int = 10) -> list[PopularDestination]:
        posts = await self._post_repo.query(PostQuery(has_location_name=True))
        return aggregate_by_location_name(posts, limit)

    async def get_recommended_places(
        self, user_id: Optional[str] = None, limit: int = 10
    ) -> list[RecommendedPlace]:
        """추천 장소. user_id는 개인화용으로 받아두지만 아직 쓰지 않는다."""
        posts = await self._post_repo.query(PostQuery(has_location_name=True))
        return recommend_places(posts, limit)

    # ─── 게시물 목록 ───

    async def get_trending_posts(self, limit: int = 12) -> list[Post]:
        """최근 기간 게시물 중 좋아요 순."""
        return await self._post_repo.query(
            PostQuery(created_from=self._window_start(), order_by=ORDER_LIKES, limit=limit)
        )

    async def get_all_trending_posts(self, page: int = 0, page_size: Optional[int] = None) -> list[Post]:
        """'전체 보기' 화면: 기간 제한 없이 좋아요 순 페이지 조회."""
        return await self._post_repo.query(
            PostQuery.page(page, self._size(page_size), order_by=ORDER_LIKES)
        )

    async def get_posts_by_category(
        self, category_id: str, page: int = 0, page_size: Optional[int] = None
    ) -> list[Post]:
        if category_id not in {c.id for c in TRAVEL_CATEGORIES}:
            raise InvalidFilterError(f"알 수 없는 카테고리: {category_id!r}")
        return await self._post_repo.query(
            PostQuery.page(
                page, self._size(page_size), category=category_id, order_by=ORDER_CREATED_AT
            )
        )

    async def get_posts_by_location(
        self, location_name: str, page: int = 0, page_size: Optional[int] = None
    ) -> list[Post]:
        """도시 또는 국가 이름 부분 일치."""
        return await self._post_repo.query(
            PostQuery.page(
                page,
                self._size(page_size),
                place_contains=location_name,
                order_by=ORDER_CREATED_AT,
            )
        )

    # ─── 사용자 ───

    async def get_suggested_users(
        self, limit: int = 10, exclude_user_id: Optional[str] = None
    ) -> list[Profile]:
        """팔로워 많은 순. 로그인 사용자 본인은 제외."""
        check_limit(limit)
        if limit == 0:
            return []
        profiles = await self._profile_repo.top_by_followers(limit)
        if exclude_user_id:
            profiles = [p for p in profiles if p.id != exclude_user_id]
        return profiles
