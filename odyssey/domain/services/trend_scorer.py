"""최근 게시물 기반 위치 트렌드 점수 계산.

게시물 하나가 점수에 더하는 값은 max(window_days - days_ago, 1).
window_days=7이면 오늘 올라온 게시물은 7, 6일 이상 지난 게시물은 1.
호출자는 이미 최근 window_days 일의 게시물만 넘겨야 한다.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Iterable, Optional

from odyssey.domain.entities import Coordinates, Post, TrendingLocation
from odyssey.domain.value_objects.location_name import split_location_name
from odyssey.domain.value_objects.post_query import check_limit

DEFAULT_WINDOW_DAYS = 7
_SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_ago(created_at: datetime, now: datetime) -> int:
    elapsed = (_as_utc(now) - _as_utc(created_at)).total_seconds()
    # 미래 시각(기기 시계 오차)은 오늘로 취급
    return max(math.floor(elapsed / _SECONDS_PER_DAY), 0)


def recency_weight(created_at: datetime, now: datetime, window_days: int = DEFAULT_WINDOW_DAYS) -> int:
    return max(window_days - days_ago(created_at, now), 1)


def post_coordinates(post: Post) -> Optional[Coordinates]:
    loc = post.location
    if loc is None or not loc.has_coordinates:
        return None
    return Coordinates(latitude=loc.latitude, longitude=loc.longitude)


def score_trending_locations(
    posts: Iterable[Post],
    window_days: int = DEFAULT_WINDOW_DAYS,
    limit: int = 10,
    now: Optional[datetime] = None,
) -> list[TrendingLocation]:
    """location_name 단위로 트렌드 점수를 누적하고 점수 내림차순으로 자른다.

    정렬은 안정 정렬이므로 동점이면 먼저 등장한 위치가 앞에 온다.
    """
    check_limit(limit)
    now = now or datetime.now(timezone.utc)
    locations: dict[str, TrendingLocation] = {}

    for post in posts:
        key = post.location_name
        if not key:
            continue

        location = locations.get(key)
        if location is None:
            city, country = split_location_name(key)
            location = TrendingLocation(
                name=key,
                city=city,
                country=country,
                coordinates=post_coordinates(post),
            )
            locations[key] = location

        location.post_count += 1
        location.recent_post_count += 1
        location.trend_score += recency_weight(post.created_at, now, window_days)

    ranked = sorted(locations.values(), key=lambda loc: loc.trend_score, reverse=True)
    return ranked[:limit]
