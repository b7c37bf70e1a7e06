"""게이트웨이 예외 정의.

Gateway exception definitions. Raised by the downstream and identity clients
and by route handlers; the application's exception handler renders them as
``{"success": false, "message": ...}`` with the carried HTTP status.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from portal.utils.exceptions import USER_INFO_FAILURE_MESSAGE

# 공통 한국어 메시지 — Shared Korean messages
SERVER_ERROR_MESSAGE: str = "서버 오류가 발생했습니다."
TOKEN_REQUIRED_MESSAGE: str = "인증 토큰이 필요합니다."


class GatewayError(Exception):
    """게이트웨이 기본 예외 — HTTP 상태와 사용자 메시지를 함께 전달.

    Base gateway exception carrying the HTTP status to answer with and the
    user-facing message.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class AuthTokenMissingError(GatewayError):
    """요청에 토큰이 없을 때 — Raised when the caller sent no token."""

    def __init__(self) -> None:
        super().__init__(401, TOKEN_REQUIRED_MESSAGE)


class IdentityProviderError(GatewayError):
    """인증 서버 조회 실패 — 프론트엔드 강제 로그아웃 신호.

    Raised for any identity-provider failure. The message is the sentinel
    the front end compares against to force a logout, always with 401.
    """

    def __init__(self) -> None:
        super().__init__(401, USER_INFO_FAILURE_MESSAGE)


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    """GatewayError를 JSON 응답으로 변환 — Render a GatewayError."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )
