from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from odyssey.domain.entities.post import Post

UNKNOWN_LOCATION = "Unknown Location"


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass
class LocationCluster:
    """지도 핀 하나에 해당하는 게시물 묶음.

    좌표는 묶음에 처음 들어온 게시물의 좌표를 그대로 쓴다 (평균 아님).
    posts 순서는 입력 순서 = created_at 내림차순.
    """

    id: str
    latitude: float
    longitude: float
    post_count: int = 0
    posts: list[Post] = field(default_factory=list)
    city: Optional[str] = None
    country: Optional[str] = None
    location_name: str = UNKNOWN_LOCATION


@dataclass
class LocationResult:
    """검색 결과의 위치 항목 (location_name 단위 집계)."""

    name: str
    city: str
    country: str
    post_count: int = 0
    coordinates: Optional[Coordinates] = None


@dataclass
class TrendingLocation(LocationResult):
    """최근 기간 내 게시물 기준 트렌드 점수가 붙은 위치."""

    recent_post_count: int = 0
    trend_score: float = 0.0


@dataclass
class PopularDestination(LocationResult):
    """게시물 수 기준 인기 여행지."""

    image_url: Optional[str] = None


@dataclass
class RecommendedPlace:
    id: str
    name: str
    city: str
    country: str
    post_count: int = 0
    image_url: Optional[str] = None
    coordinates: Optional[Coordinates] = None


@dataclass(frozen=True)
class MapCenter:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ZoomDelta:
    lat_delta: float
    lng_delta: float


@dataclass
class MapView:
    """지도 화면 한 번 렌더링에 필요한 클러스터 + 중심점 + 줌."""

    clusters: list[LocationCluster]
    center: MapCenter
    zoom: ZoomDelta
