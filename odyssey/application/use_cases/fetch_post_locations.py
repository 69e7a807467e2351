"""유즈케이스: 지도 화면용 게시물 위치 클러스터 조회.

위치가 있는 게시물을 최신순으로 가져와 클러스터로 묶고,
지도 중심점과 줌 델타를 계산한다.
"""

from __future__ import annotations

import logging

from odyssey.domain.entities import LocationCluster, MapCenter, MapView
from odyssey.domain.repositories.post_repository import PostRepository
from odyssey.domain.services.geo_grouper import group_posts_by_location
from odyssey.domain.services.map_geometry import DEFAULT_CENTER, build_map_view
from odyssey.domain.value_objects.post_query import ORDER_CREATED_AT, PostQuery

logger = logging.getLogger(__name__)


class FetchPostLocationsUseCase:
    def __init__(self, post_repo: PostRepository, fallback_center: MapCenter = DEFAULT_CENTER):
        self._post_repo = post_repo
        self._fallback_center = fallback_center

    async def execute(self) -> list[LocationCluster]:
        """위치 클러스터 목록. 백엔드 오류는 그대로 호출자에게 전달된다."""
        try:
            posts = await self._post_repo.query(
                PostQuery(has_location=True, order_by=ORDER_CREATED_AT)
            )
        except Exception as e:
            logger.error(f"게시물 위치 조회 실패: {e}")
            raise

        clusters = group_posts_by_location(posts)
        logger.info(f"위치 클러스터 {len(clusters)}개 생성 (게시물 {len(posts)}건)")
        return clusters

    async def map_view(self) -> MapView:
        clusters = await self.execute()
        return build_map_view(clusters, self._fallback_center)
