"""
错误映射 - core Result 的失败类型到 HTTP 状态码

路由调用 unwrap() 取值；失败时抛出 HTTPException，响应体为 {"detail": message}。
未处理的异常由 register_exception_handlers 注册的兜底处理器转成 500。
"""
import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from core.result import ErrorKind, Result, ServiceError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_DATA: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error_kind: ErrorKind, message: str) -> HTTPException:
    code = STATUS_BY_KIND.get(error_kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if error_kind == ErrorKind.UNEXPECTED:
        message = f"An unexpected error occurred: {message}"
    headers = {"WWW-Authenticate": "Bearer"} if error_kind == ErrorKind.TOKEN_INVALID else None
    return HTTPException(status_code=code, detail=message, headers=headers)


def unwrap(result: Result):
    """成功时返回值，失败时抛出对应的 HTTPException"""
    if result.failed:
        raise to_http_exception(result.error_kind, result.message)
    return result.value


def register_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        http_exc = to_http_exception(exc.error_kind, exc.message)
        return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail},
                            headers=http_exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"An unexpected error occurred: {exc}"},
        )
