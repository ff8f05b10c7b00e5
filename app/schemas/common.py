"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions.
Holds the message envelope returned by create/delete endpoints and by the
global error handlers.
"""

from datetime import datetime, timezone
from http import HTTPStatus

from pydantic import BaseModel, Field


def status_text(status_code: int) -> str:
    """HTTP 상태 코드를 "200 OK" 형식의 문자열로 변환합니다.

    Render an HTTP status code as "<code> <reason phrase>", e.g. "404 Not Found".
    """
    try:
        return f"{status_code} {HTTPStatus(status_code).phrase}"
    except ValueError:
        return str(status_code)


class MessageResponse(BaseModel):
    """범용 메시지 응답 스키마.

    Generic message envelope for confirmations and errors.
    Used for create and delete operations, and by the process-wide
    exception handlers for every failed request.

    Attributes:
        message: 응답 메시지 (Human-readable message)
        status: 상태 문자열 (Status text, e.g. "200 OK")
        timestamp: 응답 생성 일시 (Time the response was produced)
    """

    message: str  # 응답 메시지 (Human-readable confirmation or error message)
    status: str = "200 OK"  # 상태 문자열 (Status code and reason phrase)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))  # 응답 일시 UTC


def message_response(message: str, status_code: int = HTTPStatus.OK) -> MessageResponse:
    """메시지 응답을 생성합니다.

    Build a message envelope for the given status code.
    """
    return MessageResponse(message=message, status=status_text(status_code))
