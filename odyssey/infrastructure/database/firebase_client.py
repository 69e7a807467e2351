"""Firebase Firestore 클라이언트 생성.

firebase-admin SDK로 앱을 초기화하고 Firestore 클라이언트를 돌려준다.
클라이언트는 모듈 전역에 두지 않고 Container가 받아 각 저장소에 주입한다.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, TypeVar

import firebase_admin
from firebase_admin import credentials, firestore
from google.api_core.exceptions import GoogleAPICallError, RetryError

from odyssey.domain.exceptions import BackendError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def init_firebase(
    credential_path: str | None = None,
    project_id: str | None = None,
):
    """Firebase 앱을 초기화하고 Firestore 클라이언트를 반환.

    Args:
        credential_path: 서비스 계정 키 JSON 파일 경로.
                         없으면 GOOGLE_APPLICATION_CREDENTIALS 환경변수(ADC) 사용.
        project_id: Firebase 프로젝트 ID (선택).
    """
    if firebase_admin._apps:
        # 이미 초기화됨
        return firestore.client()

    if credential_path and Path(credential_path).exists():
        cred = credentials.Certificate(credential_path)
    else:
        cred = credentials.ApplicationDefault()

    options = {}
    if project_id:
        options["projectId"] = project_id

    firebase_admin.initialize_app(cred, options)
    logger.info("Firebase Firestore 초기화 완료")
    return firestore.client()


async def run_in_thread(operation: str, fn: Callable[[], T]) -> T:
    """동기 Firestore 호출을 스레드에서 실행하고 SDK 오류를 BackendError로 감싼다."""
    try:
        return await asyncio.to_thread(fn)
    except (GoogleAPICallError, RetryError) as e:
        raise BackendError(operation, str(e)) from e
