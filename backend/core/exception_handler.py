import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from backend.core.exception import StoreException, ApiServerException
from backend.util.constant import ERR_SERVER_ERROR

logger = logging.getLogger(__name__)


async def log_error(request: Request, exc: Exception):
    logger.error(exc.__class__.__name__)
    client = f'{request.client.host}:{request.client.port}' if request.client else '-'
    logger.error(f'{client} - "{request.method} {request.url}"')
    logger.error(exc)


def register_error_handlers(app: FastAPI):
    """
    exception 발생시, 이를 Response로 처리하여 리턴해주는 handler
    - 404 등 : 고정 메시지 plain text
    - store 오류 및 그 외 모든 오류 : '500 Server error' (내부 정보 노출 x)
    """

    @app.exception_handler(RequestValidationError)
    async def request_exception_handler(request: Request, exc: RequestValidationError):
        # body가 json object가 아닌 경우 등, 400 에러 발생시킨다
        await log_error(request, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ExceptionParser.parse_pydantic_exception(exc))

    @app.exception_handler(StoreException)
    async def store_exception_handler(request: Request, exc: StoreException):
        await log_error(request, exc)
        return PlainTextResponse(ERR_SERVER_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(ApiServerException)
    async def api_server_exception_handler(request: Request, exc: ApiServerException):
        await log_error(request, exc)
        return PlainTextResponse(exc.message, status_code=exc.status)

    @app.exception_handler(ResponseValidationError)
    async def response_exception_handler(request: Request, exc: ResponseValidationError):
        # DB에서 읽은 row가 응답 형식과 맞지 않는 경우
        await log_error(request, exc)
        return PlainTextResponse(ERR_SERVER_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        # 그 외 처리되지 않은 모든 오류
        await log_error(request, exc)
        return PlainTextResponse(ERR_SERVER_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


class ExceptionParser:
    """
    발생할 수 있는 내부 오류를 파싱하여 형식에 맞게 내보낸다
    {
        error_type : str,
        message : str,
        detail  : Any
    }
    """

    @staticmethod
    def parse_pydantic_exception(exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            errors.append(ErrorContent(error['type'], error['msg'], {
                'input': error.get('input'), 'loc': error['loc']}).__dict__)
        return errors[0] if len(errors) == 1 else errors


class ErrorContent:
    def __init__(self, error_type: str, message: str, detail: Any) -> None:
        self.error_type = error_type
        self.message = message
        self.detail = detail
