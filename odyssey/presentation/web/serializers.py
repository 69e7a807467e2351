"""도메인 엔티티 → JSON 응답 변환."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from odyssey.domain.entities import (
    Coordinates,
    LocationCluster,
    LocationResult,
    MapView,
    PopularDestination,
    Post,
    Profile,
    RecommendedPlace,
    SearchHistoryItem,
    SearchResult,
    TrendingLocation,
)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _coords(c: Coordinates | None) -> dict[str, float] | None:
    return {"latitude": c.latitude, "longitude": c.longitude} if c else None


def post_json(p: Post) -> dict[str, Any]:
    loc = p.location
    return {
        "id": p.id,
        "user_id": p.user_id,
        "title": p.title,
        "content": p.content,
        "location": {
            "latitude": loc.latitude,
            "longitude": loc.longitude,
            "city": loc.city,
            "country": loc.country,
            "address": loc.address,
        } if loc else None,
        "location_name": p.location_name,
        "images": p.images,
        "categories": p.categories,
        "likes_count": p.likes_count,
        "comments_count": p.comments_count,
        "created_at": _iso(p.created_at),
        "profiles": {
            "id": p.author.id,
            "username": p.author.username,
            "full_name": p.author.full_name,
            "avatar_url": p.author.avatar_url,
        } if p.author else None,
    }


def profile_json(p: Profile) -> dict[str, Any]:
    return {
        "id": p.id,
        "username": p.username,
        "full_name": p.full_name,
        "avatar_url": p.avatar_url,
        "bio": p.bio,
        "followers_count": p.followers_count,
        "following_count": p.following_count,
    }


def cluster_json(c: LocationCluster) -> dict[str, Any]:
    return {
        "id": c.id,
        "latitude": c.latitude,
        "longitude": c.longitude,
        "post_count": c.post_count,
        "city": c.city,
        "country": c.country,
        "location_name": c.location_name,
        "posts": [post_json(p) for p in c.posts],
    }


def map_view_json(view: MapView) -> dict[str, Any]:
    return {
        "clusters": [cluster_json(c) for c in view.clusters],
        "center": {"latitude": view.center.latitude, "longitude": view.center.longitude},
        "zoom": {"lat_delta": view.zoom.lat_delta, "lng_delta": view.zoom.lng_delta},
    }


def location_json(loc: LocationResult) -> dict[str, Any]:
    data = {
        "name": loc.name,
        "city": loc.city,
        "country": loc.country,
        "post_count": loc.post_count,
        "coordinates": _coords(loc.coordinates),
    }
    if isinstance(loc, TrendingLocation):
        data["recent_post_count"] = loc.recent_post_count
        data["trend_score"] = loc.trend_score
    if isinstance(loc, PopularDestination):
        data["image_url"] = loc.image_url
    return data


def place_json(place: RecommendedPlace) -> dict[str, Any]:
    return {
        "id": place.id,
        "name": place.name,
        "image_url": place.image_url,
        "post_count": place.post_count,
        "location": {
            "city": place.city,
            "country": place.country,
            **(_coords(place.coordinates) or {}),
        },
    }


def search_result_json(result: SearchResult) -> dict[str, Any]:
    return {
        "posts": [post_json(p) for p in result.posts],
        "users": [profile_json(u) for u in result.users],
        "locations": [location_json(loc) for loc in result.locations],
        "errors": result.errors,
    }


def history_json(item: SearchHistoryItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "user_id": item.user_id,
        "query": item.query,
        "type": item.type,
        "timestamp": _iso(item.timestamp),
    }
