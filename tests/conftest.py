"""
pytest 공용 fixture.

실제 Firestore 없이 돌도록 인메모리 저장소를 Container에 주입한다.
시각이 들어가는 계산은 고정된 NOW 기준으로 검증한다.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from httpx import ASGITransport, AsyncClient

from odyssey.domain.entities import Post, PostLocation, Profile
from odyssey.infrastructure.config.container import Container
from odyssey.infrastructure.config.settings import AppConfig, Settings
from odyssey.presentation.web.app import create_app
from tests.fakes import (
    InMemoryPostRepository,
    InMemoryProfileRepository,
    InMemorySearchHistoryRepository,
)

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

_ids = count(1)


def make_post(
    *,
    days_ago: float = 0,
    lat: float | None = None,
    lng: float | None = None,
    city: str | None = None,
    country: str | None = None,
    location_name: str | None = None,
    images: list[str] | None = None,
    likes: int = 0,
    user_id: str = "u1",
    content: str = "",
    categories: list[str] | None = None,
) -> Post:
    location = None
    if any(v is not None for v in (lat, lng, city, country)):
        location = PostLocation(latitude=lat, longitude=lng, city=city, country=country)
    return Post(
        id=f"p{next(_ids)}",
        user_id=user_id,
        created_at=NOW - timedelta(days=days_ago),
        content=content,
        location=location,
        location_name=location_name,
        images=images or [],
        categories=categories or [],
        likes_count=likes,
    )


@pytest.fixture()
def profiles() -> list[Profile]:
    return [
        Profile(id="u1", username="ayse", full_name="Ayşe Yılmaz", followers_count=120),
        Profile(id="u2", username="mehmet", full_name="Mehmet Demir", followers_count=300),
        Profile(id="u3", username="ayse_travels", full_name="Ayşe K.", followers_count=50),
    ]


@pytest.fixture()
def post_repo() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture()
def profile_repo(profiles) -> InMemoryProfileRepository:
    return InMemoryProfileRepository(profiles)


@pytest.fixture()
def history_repo() -> InMemorySearchHistoryRepository:
    return InMemorySearchHistoryRepository()


@pytest.fixture()
def container(post_repo, profile_repo, history_repo) -> Container:
    return Container(
        settings=Settings(),
        app_config=AppConfig({}),
        post_repo=post_repo,
        profile_repo=profile_repo,
        history_repo=history_repo,
        clock=lambda: NOW,
    )


@pytest.fixture()
async def client(container):
    app = create_app(container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
