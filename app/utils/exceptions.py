"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error kinds raised by
the option services. These simplify error raising across services by
eliminating the need to specify status codes at each call site.

Error kinds:
    - NullArgumentError: 필수 인자(ID, 엔티티, 목록) 누락 (Required argument absent) — 400
    - InvalidArgumentError: 비어 있으면 안 되는 목록이 비어 있음 (Empty list) — 400
    - DuplicateError: 같은 이름의 옵션이 이미 존재 (Name already exists) — 409
    - NotFoundError: 없거나 소프트 삭제된 옵션 (Missing or soft-deleted) — 404

Usage:
    from app.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Country Option not found with ID: C1")
    raise DuplicateError("Country Option already exists: Rwanda")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 옵션을 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a read/update/delete targets an id that does not exist or,
    for every non-"hard" operation, a row that has been soft-deleted.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 옵션 생성 시도 시 사용.

    409 Conflict exception.
    Raised when a create operation finds an existing row with the same name
    (deleted rows included) or the same id.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 인자 전달 시 사용.

    400 Bad Request exception.
    Base class for argument errors that Pydantic validation cannot catch.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NullArgumentError(BadRequestError):
    """필수 인자 누락 예외 — ID, 엔티티 또는 목록이 None일 때.

    Raised when a required argument (id, entity or list) is absent.
    """

    def __init__(self, detail: str = "Argument cannot be null") -> None:
        super().__init__(detail=detail)


class InvalidArgumentError(BadRequestError):
    """잘못된 인자 예외 — 비어 있으면 안 되는 목록이 비어 있을 때.

    Raised when a list argument is empty where a non-empty list is required.
    """

    def __init__(self, detail: str = "Argument cannot be empty") -> None:
        super().__init__(detail=detail)
