from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from odyssey.domain.entities import Post
from odyssey.domain.exceptions import InvalidFilterError

ORDER_CREATED_AT = "created_at"
ORDER_LIKES = "likes_count"


@dataclass(frozen=True)
class PostQuery:
    """게시물 조회 조건. 정렬은 항상 내림차순.

    문자열 조건(text, location_name_contains, place_contains)은 대소문자를
    무시한 부분 일치(ilike)다. created_from/created_to는 양 끝 포함.
    """

    text: Optional[str] = None
    user_id: Optional[str] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None
    has_location: bool = False
    has_location_name: bool = False
    location_name_contains: Optional[str] = None
    place_contains: Optional[str] = None
    category: Optional[str] = None
    order_by: str = ORDER_CREATED_AT
    limit: Optional[int] = None
    offset: int = 0

    def __post_init__(self) -> None:
        if self.order_by not in (ORDER_CREATED_AT, ORDER_LIKES):
            raise InvalidFilterError(f"정렬 필드 오류: {self.order_by!r}")
        if self.offset < 0:
            raise InvalidFilterError(f"offset은 0 이상이어야 합니다: {self.offset}")
        if self.limit is not None:
            check_limit(self.limit)

    @classmethod
    def page(cls, page: int, page_size: int, **kwargs) -> PostQuery:
        """0부터 시작하는 페이지 번호로 offset/limit을 계산."""
        if page < 0 or page_size <= 0:
            raise InvalidFilterError(f"잘못된 페이지 요청: page={page}, page_size={page_size}")
        return cls(offset=page * page_size, limit=page_size, **kwargs)

    @property
    def has_client_filters(self) -> bool:
        """백엔드로 내려보낼 수 없는 조건(존재 여부, 부분 일치)이 있는지."""
        return bool(
            self.has_location
            or self.has_location_name
            or self.text
            or self.location_name_contains
            or self.place_contains
        )

    def matches_client_filters(self, post: Post) -> bool:
        """존재 여부 + 부분 일치 조건 검사. 백엔드가 ilike를 지원하지 않을 때 사용."""
        if self.has_location and (post.location is None or not post.location.has_coordinates):
            return False
        if self.has_location_name and not post.location_name:
            return False
        if self.text and not (
            ilike(post.location_name, self.text) or ilike(post.content, self.text)
        ):
            return False
        if self.location_name_contains and not ilike(
            post.location_name, self.location_name_contains
        ):
            return False
        if self.place_contains:
            loc = post.location
            if loc is None or not (
                ilike(loc.city, self.place_contains) or ilike(loc.country, self.place_contains)
            ):
                return False
        return True


def check_limit(limit: int) -> None:
    if limit < 0:
        raise InvalidFilterError(f"limit은 0 이상이어야 합니다: {limit}")


def ilike(value: Optional[str], term: str) -> bool:
    return value is not None and term.lower() in value.lower()
