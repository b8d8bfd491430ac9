"""
도메인 예외 → HTTPException 변환

라우트에서 서비스 호출을 감싸 HTTP 상태 코드로 변환.
"""

from fastapi import HTTPException, status

from core.finance.errors import ValidationError
from core.storage.record_store import DuplicateRecordError, RecordNotFoundError

# 라우트에서 잡아서 변환하는 예외
DOMAIN_ERRORS = (ValidationError, RecordNotFoundError, DuplicateRecordError, PermissionError)


def to_http_exception(exc: Exception) -> HTTPException:
    """도메인 예외를 HTTPException으로 변환

    - ValidationError: 422, detail = {code, message}
    - RecordNotFoundError: 404
    - DuplicateRecordError: 409
    - PermissionError: 403
    """
    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=422,
            detail={"code": exc.code, "message": exc.message},
        )
    if isinstance(exc, RecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, DuplicateRecordError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    raise TypeError(f"Unmapped error type: {type(exc).__name__}") from exc
