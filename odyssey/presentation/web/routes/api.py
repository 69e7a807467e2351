"""REST API 라우트 — 지도, 통합 검색, 탐색 탭."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, Query, Request

from odyssey.domain.entities import TRAVEL_CATEGORIES, SearchFilters
from odyssey.presentation.web.serializers import (
    location_json,
    map_view_json,
    place_json,
    post_json,
    profile_json,
    search_result_json,
)

router = APIRouter(tags=["api"])


def _get_container(request: Request):
    return request.app.state.container


@router.get("/map/locations")
async def map_locations(request: Request):
    """지도 화면: 위치 클러스터 + 중심점 + 줌 델타."""
    c = _get_container(request)
    view = await c.fetch_post_locations_use_case().map_view()
    return map_view_json(view)


@router.get("/search")
async def search(
    request: Request,
    q: str = "",
    location: str | None = None,
    username: str | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
    sort_by: str = "recent",
):
    """게시물/사용자/위치 통합 검색."""
    c = _get_container(request)
    filters = SearchFilters(
        location=location,
        username=username,
        date_from=date_from,
        date_to=date_to,
        sort_by=sort_by,
    )
    result = await c.search_use_case().execute(q, filters)
    return search_result_json(result)


@router.get("/discover/categories")
async def categories():
    return [
        {"id": cat.id, "name": cat.name, "icon": cat.icon, "color": cat.color}
        for cat in TRAVEL_CATEGORIES
    ]


# limit=0은 빈 목록, 생략하면 설정값
Limit = Annotated[Optional[int], Query(ge=0)]
Page = Annotated[int, Query(ge=0)]
PageSize = Annotated[Optional[int], Query(ge=1)]


@router.get("/discover/trending-locations")
async def trending_locations(request: Request, limit: Limit = None):
    c = _get_container(request)
    if limit is None:
        limit = c.config.discovery.default_limit
    locations = await c.discover_use_case().get_trending_locations(limit)
    return [location_json(loc) for loc in locations]


@router.get("/discover/popular-destinations")
async def popular_destinations(request: Request, limit: Limit = None):
    c = _get_container(request)
    if limit is None:
        limit = c.config.discovery.default_limit
    destinations = await c.discover_use_case().get_popular_destinations(limit)
    return [location_json(d) for d in destinations]


@router.get("/discover/recommended-places")
async def recommended_places(
    request: Request, user_id: str | None = None, limit: Limit = None
):
    c = _get_container(request)
    if limit is None:
        limit = c.config.discovery.default_limit
    places = await c.discover_use_case().get_recommended_places(user_id, limit)
    return [place_json(p) for p in places]


@router.get("/discover/trending-posts")
async def trending_posts(request: Request, limit: Limit = None):
    c = _get_container(request)
    if limit is None:
        limit = c.config.discovery.trending_posts_limit
    posts = await c.discover_use_case().get_trending_posts(limit)
    return [post_json(p) for p in posts]


@router.get("/discover/suggested-users")
async def suggested_users(
    request: Request, exclude_user_id: str | None = None, limit: Limit = None
):
    c = _get_container(request)
    if limit is None:
        limit = c.config.discovery.default_limit
    users = await c.discover_use_case().get_suggested_users(limit, exclude_user_id)
    return [profile_json(u) for u in users]


@router.get("/posts/trending")
async def all_trending_posts(
    request: Request, page: Page = 0, page_size: PageSize = None
):
    c = _get_container(request)
    posts = await c.discover_use_case().get_all_trending_posts(page, page_size)
    return [post_json(p) for p in posts]


@router.get("/posts/category/{category_id}")
async def posts_by_category(
    request: Request, category_id: str, page: Page = 0, page_size: PageSize = None
):
    c = _get_container(request)
    posts = await c.discover_use_case().get_posts_by_category(category_id, page, page_size)
    return [post_json(p) for p in posts]


@router.get("/posts/location/{location_name}")
async def posts_by_location(
    request: Request, location_name: str, page: Page = 0, page_size: PageSize = None
):
    c = _get_container(request)
    posts = await c.discover_use_case().get_posts_by_location(location_name, page, page_size)
    return [post_json(p) for p in posts]
