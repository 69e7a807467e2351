"""location_name 기준 게시물 집계 (검색 위치, 인기 여행지, 추천 장소).

그룹 키는 location_name 원문 그대로다. "Paris, France"와 "paris, france"는
서로 다른 그룹이 된다.

대표 좌표와 대표 이미지는 '처음 채워진 값이 유지'된다. 입력은 백엔드가
돌려준 순서(created_at 내림차순)로 처리하므로 가장 최근 게시물의 값이 쓰인다.
"""

from __future__ import annotations

from typing import Iterable

from odyssey.domain.entities import (
    LocationResult,
    PopularDestination,
    Post,
    RecommendedPlace,
)
from odyssey.domain.services.trend_scorer import post_coordinates
from odyssey.domain.value_objects.location_name import place_slug, split_location_name
from odyssey.domain.value_objects.post_query import check_limit


def _group_by_location_name(posts: Iterable[Post]) -> dict[str, list[Post]]:
    groups: dict[str, list[Post]] = {}
    for post in posts:
        if post.location_name:
            groups.setdefault(post.location_name, []).append(post)
    return groups


def _first_image(posts: list[Post]) -> str | None:
    for post in posts:
        if post.first_image:
            return post.first_image
    return None


def _by_post_count(items: list, limit: int) -> list:
    check_limit(limit)
    return sorted(items, key=lambda item: item.post_count, reverse=True)[:limit]


def group_location_results(posts: Iterable[Post], limit: int = 10) -> list[LocationResult]:
    """검색용 위치 목록. 좌표는 그룹의 첫 게시물에 좌표가 있을 때만 채운다."""
    results = []
    for name, members in _group_by_location_name(posts).items():
        city, country = split_location_name(name)
        results.append(
            LocationResult(
                name=name,
                city=city,
                country=country,
                post_count=len(members),
                coordinates=post_coordinates(members[0]),
            )
        )
    return _by_post_count(results, limit)


def aggregate_by_location_name(posts: Iterable[Post], limit: int = 10) -> list[PopularDestination]:
    """인기 여행지: 게시물 수 내림차순, 이미지는 첫 번째로 발견된 images[0]."""
    destinations = []
    for name, members in _group_by_location_name(posts).items():
        city, country = split_location_name(name)
        destinations.append(
            PopularDestination(
                name=name,
                city=city,
                country=country,
                post_count=len(members),
                coordinates=post_coordinates(members[0]),
                image_url=_first_image(members),
            )
        )
    return _by_post_count(destinations, limit)


def recommend_places(posts: Iterable[Post], limit: int = 10) -> list[RecommendedPlace]:
    return [
        RecommendedPlace(
            id=place_slug(dest.name),
            name=dest.name,
            city=dest.city,
            country=dest.country,
            post_count=dest.post_count,
            image_url=dest.image_url,
            coordinates=dest.coordinates,
        )
        for dest in aggregate_by_location_name(posts, limit)
    ]
