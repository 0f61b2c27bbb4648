"""
core/result.py

统一的服务结果类型 - 所有 registry / auth 操作返回此类型
Failures carry an ErrorKind discriminant plus a human readable message;
the HTTP layer maps the kind to a status code.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class ErrorKind(str, Enum):
    """失败类型"""
    NOT_FOUND = "not_found"
    INVALID_DATA = "invalid_data"
    ALREADY_EXISTS = "already_exists"
    TOKEN_INVALID = "token_invalid"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    操作结果

    Either a success carrying ``value`` or a failure carrying ``error_kind``
    and ``message``. Results are immutable.
    """
    success: bool
    value: Optional[T] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @staticmethod
    def ok(value: Any = None, message: str = "") -> "Result":
        """快速创建成功结果"""
        return Result(success=True, value=value, message=message)

    @staticmethod
    def fail(error_kind: ErrorKind, message: str) -> "Result":
        """快速创建失败结果"""
        return Result(success=False, error_kind=error_kind, message=message)

    @property
    def failed(self) -> bool:
        return not self.success

    def then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Chain another result-returning step; failures short-circuit."""
        if not self.success:
            return self  # type: ignore[return-value]
        return func(self.value)

    def unwrap(self) -> T:
        """Return the value or raise ServiceError for a failure."""
        if not self.success:
            raise ServiceError(self.error_kind, self.message)
        return self.value


class ServiceError(Exception):
    """Raised by Result.unwrap() when the result is a failure."""

    def __init__(self, error_kind: ErrorKind, message: str):
        super().__init__(message)
        self.error_kind = error_kind
        self.message = message


def not_found(message: str) -> Result:
    return Result.fail(ErrorKind.NOT_FOUND, message)


def invalid_data(message: str) -> Result:
    return Result.fail(ErrorKind.INVALID_DATA, message)


def unexpected(message: str) -> Result:
    return Result.fail(ErrorKind.UNEXPECTED, message)
