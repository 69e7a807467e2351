from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from odyssey.domain.entities.location import LocationResult
from odyssey.domain.entities.post import Post
from odyssey.domain.entities.profile import Profile
from odyssey.domain.exceptions import InvalidFilterError

SORT_RECENT = "recent"
SORT_POPULAR = "popular"
SORT_TRENDING = "trending"
SORT_OPTIONS = (SORT_RECENT, SORT_POPULAR, SORT_TRENDING)

HISTORY_TYPES = ("location", "username", "tag")


@dataclass
class SearchFilters:
    """통합 검색 필터.

    sort_by:
        recent   — created_at 내림차순 (기본)
        popular  — likes_count 내림차순
        trending — 최근 7일 + likes_count 내림차순.
                   TrendScorer의 위치 트렌드와는 다른 개념이다.
    """

    location: Optional[str] = None
    username: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    sort_by: str = SORT_RECENT

    def __post_init__(self) -> None:
        if self.sort_by not in SORT_OPTIONS:
            raise InvalidFilterError(
                f"지원하지 않는 정렬 기준: {self.sort_by!r} (가능: {', '.join(SORT_OPTIONS)})"
            )
        # 시간대 없는 날짜는 UTC로 간주
        if self.date_from is not None and self.date_from.tzinfo is None:
            self.date_from = self.date_from.replace(tzinfo=timezone.utc)
        if self.date_to is not None and self.date_to.tzinfo is None:
            self.date_to = self.date_to.replace(tzinfo=timezone.utc)


@dataclass
class SearchResult:
    """게시물/사용자/위치 세 검색의 합본. 세 목록 간 중복 제거는 하지 않는다.

    errors: 실패한 섹션 이름 → 오류 메시지. 실패한 섹션은 빈 목록으로 채워지므로
    '결과 없음'과 '조회 실패'를 구분하려면 이 값을 확인해야 한다.
    """

    posts: list[Post] = field(default_factory=list)
    users: list[Profile] = field(default_factory=list)
    locations: list[LocationResult] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_partial(self) -> bool:
        return bool(self.errors)


@dataclass
class SearchHistoryItem:
    """사용자별 최근 검색어."""

    user_id: str
    query: str
    type: str
    timestamp: datetime

    id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.type not in HISTORY_TYPES:
            raise InvalidFilterError(f"알 수 없는 검색 기록 유형: {self.type!r}")


@dataclass(frozen=True)
class TravelCategory:
    id: str
    name: str
    icon: str
    color: str


TRAVEL_CATEGORIES: tuple[TravelCategory, ...] = (
    TravelCategory("adventure", "Adventure", "trail-sign", "#FF6B6B"),
    TravelCategory("beach", "Beach", "water", "#4ECDC4"),
    TravelCategory("city", "City", "business", "#95E1D3"),
    TravelCategory("nature", "Nature", "leaf", "#38A169"),
    TravelCategory("culture", "Culture", "library", "#9B59B6"),
    TravelCategory("food", "Food", "restaurant", "#F39C12"),
    TravelCategory("mountain", "Mountain", "triangle", "#8B4513"),
    TravelCategory("wildlife", "Wildlife", "paw", "#27AE60"),
)
