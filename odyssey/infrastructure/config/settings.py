from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings

from odyssey.domain.entities import MapCenter
from odyssey.domain.services.map_geometry import DEFAULT_CENTER


# ──────────────────────────────────────────
# 환경변수 기반 시크릿 설정 (.env)
# ──────────────────────────────────────────
class Settings(BaseSettings):
    # Firebase
    firebase_credential_path: str = "firebase-service-account.json"
    firebase_project_id: str = ""

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# ──────────────────────────────────────────
# YAML 기반 앱 설정 (config/settings.yaml)
# ──────────────────────────────────────────
class DiscoveryConfig:
    def __init__(self, data: dict[str, Any]):
        self.trend_window_days: int = data.get("trend_window_days", 7)
        self.search_post_limit: int = data.get("search_post_limit", 20)
        self.search_user_limit: int = data.get("search_user_limit", 20)
        self.search_location_limit: int = data.get("search_location_limit", 10)
        self.default_limit: int = data.get("default_limit", 10)
        self.trending_posts_limit: int = data.get("trending_posts_limit", 12)
        self.page_size: int = data.get("page_size", 20)


class MapConfig:
    def __init__(self, data: dict[str, Any]):
        center = data.get("default_center", {})
        self.default_center = MapCenter(
            latitude=float(center.get("latitude", DEFAULT_CENTER.latitude)),
            longitude=float(center.get("longitude", DEFAULT_CENTER.longitude)),
        )


class WebConfig:
    def __init__(self, data: dict[str, Any]):
        self.host: str = data.get("host", "0.0.0.0")
        self.port: int = data.get("port", 8000)


class AppConfig:
    """YAML에서 로드된 전체 앱 설정."""

    def __init__(self, data: dict[str, Any]):
        self.name: str = data.get("app", {}).get("name", "Odyssey Journal Discovery")

        self.discovery = DiscoveryConfig(data.get("discovery", {}))
        self.map = MapConfig(data.get("map", {}))
        self.web = WebConfig(data.get("web", {}))


def load_app_config(path: str = "config/settings.yaml") -> AppConfig:
    """YAML 설정 파일을 로드하여 AppConfig를 반환."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig({})
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(data)
