"""도메인 레이어 예외 정의."""


class DomainError(Exception):
    """도메인 레이어 최상위 예외."""


class BackendError(DomainError):
    """백엔드(Firestore) 조회 중 발생한 오류."""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        message = f"백엔드 조회 실패: {operation}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidFilterError(DomainError):
    """검색/조회 조건 값이 허용 범위를 벗어났을 때."""
