"""의존성 주입 컨테이너.

클린 아키텍처에서 모든 의존성 조립은 최외곽(Composition Root)에서 이루어진다.
이 컨테이너가 Firestore 클라이언트를 받아 저장소를 만들고 유즈케이스에 주입한다.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from odyssey.application.use_cases.discover import DiscoverUseCase
from odyssey.application.use_cases.fetch_post_locations import FetchPostLocationsUseCase
from odyssey.application.use_cases.search import SearchUseCase
from odyssey.application.use_cases.search_history import SearchHistoryUseCase
from odyssey.domain.entities.post import utcnow
from odyssey.domain.repositories.post_repository import PostRepository
from odyssey.domain.repositories.profile_repository import ProfileRepository
from odyssey.domain.repositories.search_history_repository import SearchHistoryRepository
from odyssey.infrastructure.config.settings import AppConfig, Settings
from odyssey.infrastructure.database.repositories.post_repo import FirestorePostRepository
from odyssey.infrastructure.database.repositories.profile_repo import FirestoreProfileRepository
from odyssey.infrastructure.database.repositories.search_history_repo import (
    FirestoreSearchHistoryRepository,
)


class Container:
    """애플리케이션 의존성 컨테이너."""

    def __init__(
        self,
        settings: Settings,
        app_config: AppConfig,
        post_repo: PostRepository,
        profile_repo: ProfileRepository,
        history_repo: SearchHistoryRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.settings = settings
        self.config = app_config
        self.clock = clock

        self.post_repo = post_repo
        self.profile_repo = profile_repo
        self.history_repo = history_repo

    @classmethod
    def from_firestore(cls, settings: Settings, app_config: AppConfig, firestore_db) -> Container:
        # ─── Repositories (Firebase Firestore) ───
        return cls(
            settings=settings,
            app_config=app_config,
            post_repo=FirestorePostRepository(firestore_db),
            profile_repo=FirestoreProfileRepository(firestore_db),
            history_repo=FirestoreSearchHistoryRepository(firestore_db),
        )

    # ─── Use Case 팩토리 ───

    def fetch_post_locations_use_case(self) -> FetchPostLocationsUseCase:
        return FetchPostLocationsUseCase(
            post_repo=self.post_repo,
            fallback_center=self.config.map.default_center,
        )

    def search_use_case(self) -> SearchUseCase:
        cfg = self.config.discovery
        return SearchUseCase(
            post_repo=self.post_repo,
            profile_repo=self.profile_repo,
            post_limit=cfg.search_post_limit,
            user_limit=cfg.search_user_limit,
            location_limit=cfg.search_location_limit,
            trending_window_days=cfg.trend_window_days,
            clock=self.clock,
        )

    def discover_use_case(self) -> DiscoverUseCase:
        cfg = self.config.discovery
        return DiscoverUseCase(
            post_repo=self.post_repo,
            profile_repo=self.profile_repo,
            trend_window_days=cfg.trend_window_days,
            page_size=cfg.page_size,
            clock=self.clock,
        )

    def search_history_use_case(self) -> SearchHistoryUseCase:
        return SearchHistoryUseCase(history_repo=self.history_repo, clock=self.clock)
