from __future__ import annotations

from typing import Protocol

from odyssey.domain.entities import Profile


class ProfileRepository(Protocol):
    """사용자 프로필 저장소 인터페이스."""

    async def search(self, text: str, limit: int = 20) -> list[Profile]:
        """username 또는 full_name 부분 일치 검색."""
        ...

    async def find_by_username(self, text: str) -> Profile | None:
        """username 부분 일치로 프로필 하나를 찾는다. 정확히 같은 username을 우선."""
        ...

    async def top_by_followers(self, limit: int = 10) -> list[Profile]: ...
