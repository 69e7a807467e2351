"""위치 태그된 게시물을 지도 핀 단위로 묶는다.

클러스터 키 규칙:
  - city와 country가 모두 있으면 "{city}-{country}"
  - 아니면 좌표를 소수점 둘째 자리(약 1.1km)로 반올림한 "{lat}-{lng}"

두 게시물은 키가 같을 때에만 같은 클러스터에 들어간다.
"""

from __future__ import annotations

import math
from typing import Iterable

from odyssey.domain.entities import LocationCluster, Post, PostLocation
from odyssey.domain.entities.location import UNKNOWN_LOCATION


def round_coordinate(value: float) -> float:
    """소수점 둘째 자리 반올림. .5는 항상 +무한대 방향 (Math.round와 동일)."""
    return math.floor(value * 100 + 0.5) / 100


def _format_coordinate(value: float) -> str:
    # 모바일 클라이언트와 같은 키를 만들기 위해 정수값은 "48"처럼 소수부 없이 출력
    if value.is_integer():
        return str(int(value))
    return repr(value)


def cluster_key(location: PostLocation) -> str:
    if location.city and location.country:
        return f"{location.city}-{location.country}"
    lat = _format_coordinate(round_coordinate(location.latitude))
    lng = _format_coordinate(round_coordinate(location.longitude))
    return f"{lat}-{lng}"


def group_posts_by_location(posts: Iterable[Post]) -> list[LocationCluster]:
    """게시물을 입력 순서대로 훑으며 클러스터를 만든다.

    - 좌표가 없는 게시물은 건너뛴다 (오류 아님).
    - 클러스터 좌표/도시/국가는 처음 만난 게시물 기준이며 이후 갱신하지 않는다.
    - 반환 순서는 키를 처음 만난 순서. 입력이 created_at 내림차순이면
      각 클러스터의 posts도 최신순이 된다.
    """
    clusters: dict[str, LocationCluster] = {}

    for post in posts:
        loc = post.location
        if loc is None or not loc.has_coordinates:
            continue

        key = cluster_key(loc)
        cluster = clusters.get(key)
        if cluster is None:
            cluster = LocationCluster(
                id=key,
                latitude=loc.latitude,
                longitude=loc.longitude,
                city=loc.city,
                country=loc.country,
                location_name=loc.city or loc.country or UNKNOWN_LOCATION,
            )
            clusters[key] = cluster

        cluster.posts.append(post)
        cluster.post_count += 1

    return list(clusters.values())
