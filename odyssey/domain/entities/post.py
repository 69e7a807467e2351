from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class PostLocation:
    """게시물에 태그된 위치 정보."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    city: Optional[str] = None
    country: Optional[str] = None
    address: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass
class AuthorRef:
    """게시물 작성자 프로필 요약 (조인 결과를 그대로 전달)."""

    id: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None


@dataclass
class Post:
    """여행 기록 게시물 도메인 엔티티 (백엔드 읽기 전용)."""

    id: str
    user_id: str
    created_at: datetime

    title: str = ""
    content: str = ""
    location: Optional[PostLocation] = None
    location_name: Optional[str] = None
    images: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)

    likes_count: int = 0
    comments_count: int = 0
    updated_at: Optional[datetime] = None

    author: Optional[AuthorRef] = None

    @property
    def first_image(self) -> Optional[str]:
        return self.images[0] if self.images else None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
