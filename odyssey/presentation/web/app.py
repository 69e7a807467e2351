"""FastAPI 웹 애플리케이션 팩토리."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from odyssey.domain.exceptions import BackendError, InvalidFilterError
from odyssey.infrastructure.config.container import Container
from odyssey.presentation.web.routes import api, history

logger = logging.getLogger(__name__)


async def _invalid_filter(request: Request, exc: InvalidFilterError):
    return JSONResponse(status_code=422, content={"error": str(exc)})


async def _backend_error(request: Request, exc: BackendError):
    logger.error(f"{request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"error": str(exc)})


def create_app(container: Container) -> FastAPI:
    app = FastAPI(title=container.config.name, version="0.1.0")

    # 컨테이너를 앱 state에 저장
    app.state.container = container

    app.add_exception_handler(InvalidFilterError, _invalid_filter)
    app.add_exception_handler(BackendError, _backend_error)

    # 라우터 등록
    app.include_router(api.router, prefix="/api")
    app.include_router(history.router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
