# app/core/exceptions.py

"""
서비스 계층에서 발생하는 비즈니스 예외와 FastAPI 예외 핸들러를 정의하는 모듈입니다.

- NotFoundError: 대상 ID(또는 고유 키)가 존재하지 않음 -> HTTP 404
- ConflictError: 고유성 제약 위반, 하위 항목이 있어 삭제 불가 -> HTTP 400
- ValidationError: 필드 제약 또는 도메인 규칙 위반 -> HTTP 400

gRPC 서비서는 같은 예외를 success=false 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """모든 비즈니스 예외의 기본 클래스입니다."""
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    요청 본문/쿼리 검증 실패를 422 대신 400으로 반환합니다.
    """
    logger.info("%s %s -> 400: request validation failed", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
