from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
import logging
import traceback

from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode
from app.common.response.response_template import ResponseTemplate

logger = logging.getLogger(__name__)

def register_exception_handler(app: FastAPI):
    # 사용자 정의 예외(ApiException) 처리
    @app.exception_handler(ApiException)
    async def api_exception_handler(request: Request, exc: ApiException):
        if exc.code.status_code() >= 500:
            logger.error(f"ApiException occurred: {exc.code.name} - {exc.message}", exc_info=exc)
        else:
            logger.warning(f"ApiException occurred: {exc.code.name} - {exc.message}")
        return ResponseTemplate.fail(
            code=exc.code,
            custom_message=exc.message,
        )

    # 요청 본문 검증 실패 - 어떤 필드가 왜 잘못되었는지 그대로 전달
    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        details = [
            f"{'.'.join(str(loc) for loc in error.get('loc', ()) if loc != 'body')}: {error.get('msg')}"
            for error in errors
        ]
        logger.warning(f"Request validation failed: {details}")
        return ResponseTemplate.fail(
            FailureCode.BAD_REQUEST,
            custom_message="; ".join(details) or None,
        )

    # 예상치 못한 모든 예외 처리
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        tb_str = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.error(f"Unhandled exception occurred: {exc}\nStack trace:\n{tb_str}")
        return ResponseTemplate.fail(
            FailureCode.INTERNAL_SERVER_ERROR,
        )
