"""백엔드 HTTP 예외 모듈.

HTTP errors raised by the backend services and dependencies. FastAPI
renders them as ``{"detail": ...}``; the gateway forwards ``detail`` to the
front end as ``message``.

Usage:
    from portal.utils.exceptions import NotFoundError
    raise NotFoundError("사업 ID 3를 찾을 수 없습니다.")
"""

from fastapi import HTTPException, status

# 프론트엔드 강제 로그아웃 트리거 — Sentinel message that triggers a forced logout
USER_INFO_FAILURE_MESSAGE: str = "Failed to fetch user information"


class PortalError(HTTPException):
    """상태 코드와 기본 메시지를 클래스에 고정한 HTTP 예외.

    Subclasses set ``status_code`` and ``default_detail``; callers pass only
    the message.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(status_code=type(self).status_code, detail=detail or self.default_detail)


class BadRequestError(PortalError):
    """스키마는 통과했지만 참조 무결성을 깨는 요청 (e.g. unknown partner)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"


class UnauthorizedError(PortalError):
    """토큰 누락/만료/위조."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = USER_INFO_FAILURE_MESSAGE


class ForbiddenError(PortalError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Insufficient permissions"


class NotFoundError(PortalError):
    """없는 행 또는 soft-delete 된 행."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"
