"""Odyssey Journal Discovery — 엔트리포인트.

1. 설정 로드 (.env + config/settings.yaml)
2. Firebase Firestore 초기화
3. 의존성 컨테이너 조립
4. 웹 서버 시작 또는 단발성 조회 명령 실행

모바일 앱의 지도/검색/탐색 화면이 이 서버의 JSON API를 호출한다.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

import uvicorn

from odyssey.infrastructure.config.container import Container
from odyssey.infrastructure.config.settings import AppConfig, Settings, load_app_config
from odyssey.infrastructure.database.firebase_client import init_firebase
from odyssey.presentation.web.app import create_app

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    Path("logs").mkdir(exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler("logs/app.log", encoding="utf-8"),
        ],
    )


def build_container(settings: Settings, config: AppConfig) -> Container:
    db = init_firebase(
        credential_path=settings.firebase_credential_path,
        project_id=settings.firebase_project_id or None,
    )
    return Container.from_firestore(settings, config, db)


async def run_server(settings: Settings, config: AppConfig) -> None:
    """메인 서버 실행."""
    container = build_container(settings, config)

    app = create_app(container)
    server_config = uvicorn.Config(
        app,
        host=config.web.host,
        port=config.web.port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(server_config)

    logger.info(f"서버 시작: http://{config.web.host}:{config.web.port}")
    await server.serve()


async def run_locations(settings: Settings, config: AppConfig) -> None:
    """위치 클러스터와 지도 중심/줌을 출력."""
    container = build_container(settings, config)
    view = await container.fetch_post_locations_use_case().map_view()

    for cluster in view.clusters:
        print(f"{cluster.location_name:<30} {cluster.post_count:>4}건  ({cluster.id})")
    print(f"\n중심: {view.center.latitude:.4f}, {view.center.longitude:.4f}")
    print(f"줌:   {view.zoom.lat_delta:.2f} x {view.zoom.lng_delta:.2f}")


async def run_trending(settings: Settings, config: AppConfig, limit: int) -> None:
    """최근 트렌드 위치 순위를 출력."""
    container = build_container(settings, config)
    trending = await container.discover_use_case().get_trending_locations(limit)

    if not trending:
        print("최근 게시물이 없습니다.")
        return
    for rank, loc in enumerate(trending, start=1):
        print(f"{rank:>2}. {loc.name:<30} 점수 {loc.trend_score:>5.0f}  게시물 {loc.post_count}건")


def main() -> None:
    parser = argparse.ArgumentParser(description="Odyssey Journal Discovery")
    subparsers = parser.add_subparsers(dest="command", help="실행 명령")

    subparsers.add_parser("serve", help="API 서버 시작")
    subparsers.add_parser("locations", help="지도 위치 클러스터 출력")

    trending_parser = subparsers.add_parser("trending", help="트렌드 위치 순위 출력")
    trending_parser.add_argument("--limit", type=int, default=10, help="출력할 위치 수 (기본: 10)")

    args = parser.parse_args()

    settings = Settings()
    config = load_app_config()
    setup_logging(settings.log_level)

    if args.command == "serve":
        asyncio.run(run_server(settings, config))
    elif args.command == "locations":
        asyncio.run(run_locations(settings, config))
    elif args.command == "trending":
        asyncio.run(run_trending(settings, config, args.limit))
    else:
        parser.print_help()
        print("\n사용 방법:")
        print("  python main.py serve              # API 서버 시작")
        print("  python main.py locations          # 지도 클러스터 확인")
        print("  python main.py trending --limit 5 # 트렌드 위치 상위 5곳")


if __name__ == "__main__":
    main()
