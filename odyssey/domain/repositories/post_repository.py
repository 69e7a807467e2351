from __future__ import annotations

from typing import Protocol

from odyssey.domain.entities import Post
from odyssey.domain.value_objects.post_query import PostQuery


class PostRepository(Protocol):
    """게시물 저장소 인터페이스 (의존성 역전).

    정렬/페이지네이션은 저장소 쪽으로 내려보내며 코어에서 다시 구현하지 않는다.
    """

    async def query(self, query: PostQuery) -> list[Post]:
        """조건에 맞는 게시물 조회. 실패 시 BackendError."""
        ...
