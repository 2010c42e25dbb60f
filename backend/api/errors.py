"""도메인 예외 → HTTP 응답 변환"""
from fastapi import HTTPException, status

from domain.exceptions import (
    DomainError, InvalidParametersError, AccountNotFoundError, AccountMismatchError,
    AlreadyEntitledError, OrderNotFoundError, AlreadyProcessedError, GatewayError,
    OrderCodeUnavailableError, InvalidCredentialsError, EmailAlreadyExistsError,
)

_STATUS_CODES = {
    InvalidParametersError: status.HTTP_400_BAD_REQUEST,
    AlreadyEntitledError: status.HTTP_400_BAD_REQUEST,
    EmailAlreadyExistsError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    AccountMismatchError: status.HTTP_403_FORBIDDEN,
    AccountNotFoundError: status.HTTP_404_NOT_FOUND,
    OrderNotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyProcessedError: status.HTTP_409_CONFLICT,
    GatewayError: status.HTTP_502_BAD_GATEWAY,
    OrderCodeUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: DomainError, detail: str = None, status_code: int = None) -> HTTPException:
    """라우터가 status_code를 넘기면 기본 매핑보다 우선한다"""
    if status_code is None:
        status_code = _STATUS_CODES.get(type(error), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=detail or str(error))
