"""PostRepository — Firebase Firestore 구현.

Firestore 컬렉션: 'posts'
문서 ID: 게시물 ID
작성자 프로필은 조인 대신 문서 안의 'profiles' 맵으로 비정규화되어 있다.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from odyssey.domain.entities import AuthorRef, Post, PostLocation
from odyssey.domain.value_objects.post_query import PostQuery
from odyssey.infrastructure.database.firebase_client import run_in_thread

# ─── Firestore 문서 → 도메인 엔티티 변환 ───


def to_datetime(value: Any) -> datetime | None:
    """Firestore Timestamp(datetime 하위 클래스) 또는 ISO 8601 문자열."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _location_from_dict(d: dict[str, Any] | None) -> PostLocation | None:
    if not d:
        return None
    return PostLocation(
        latitude=d.get("latitude"),
        longitude=d.get("longitude"),
        city=d.get("city"),
        country=d.get("country"),
        address=d.get("address"),
    )


def _author_from_dict(d: dict[str, Any] | None) -> AuthorRef | None:
    if not d or not d.get("id"):
        return None
    return AuthorRef(
        id=d["id"],
        username=d.get("username"),
        full_name=d.get("full_name"),
        avatar_url=d.get("avatar_url"),
    )


def _post_from_doc(doc) -> Post:
    d = doc.to_dict()
    return Post(
        id=doc.id,
        user_id=d.get("user_id", ""),
        created_at=to_datetime(d.get("created_at")),
        title=d.get("title", ""),
        content=d.get("content", ""),
        location=_location_from_dict(d.get("location")),
        location_name=d.get("location_name"),
        images=d.get("images") or [],
        categories=d.get("categories") or [],
        likes_count=d.get("likes_count", 0),
        comments_count=d.get("comments_count", 0),
        updated_at=to_datetime(d.get("updated_at")),
        author=_author_from_dict(d.get("profiles")),
    )


class FirestorePostRepository:
    """Firestore 기반 PostRepository 구현."""

    COLLECTION = "posts"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def query(self, query: PostQuery) -> list[Post]:
        def _query():
            if query.limit == 0:
                return []

            q = self._col()

            # 등호/범위/정렬은 Firestore로 내려보낸다
            if query.user_id:
                q = q.where("user_id", "==", query.user_id)
            if query.category:
                q = q.where("categories", "array_contains", query.category)
            if query.created_from:
                q = q.where("created_at", ">=", query.created_from)
            if query.created_to:
                q = q.where("created_at", "<=", query.created_to)
            q = q.order_by(query.order_by, direction="DESCENDING")

            if not query.has_client_filters:
                if query.offset:
                    q = q.offset(query.offset)
                if query.limit is not None:
                    q = q.limit(query.limit)
                return [_post_from_doc(doc) for doc in q.stream()]

            # Firestore는 부분 일치/존재 여부 검색이 제한적이므로 클라이언트에서 필터링
            posts = [
                post
                for post in (_post_from_doc(doc) for doc in q.stream())
                if query.matches_client_filters(post)
            ]
            end = None if query.limit is None else query.offset + query.limit
            return posts[query.offset : end]

        return await run_in_thread("posts.query", _query)
