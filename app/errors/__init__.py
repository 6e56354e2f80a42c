"""发票看板 - HTTP 边界的异常映射.

业务异常定义见 `app.core.exceptions`, 这里负责把异常映射为 HTTP 状态码.
"""

from __future__ import annotations

from werkzeug.exceptions import HTTPException

from app.constants import HttpStatus
from app.core.exceptions import AppError, AuthError, NotFoundError

EXCEPTION_STATUS_MAP: dict[type[BaseException], int] = {
    AuthError: HttpStatus.UNAUTHORIZED,
    NotFoundError: HttpStatus.NOT_FOUND,
}


def map_exception_to_status(error: BaseException, default: int = HttpStatus.INTERNAL_SERVER_ERROR) -> int:
    """根据异常类型推导 HTTP 状态码.

    Werkzeug 的 HTTPException 直接使用自身 code, 其余未登记的异常一律按 500 处理.
    """
    if isinstance(error, HTTPException) and error.code is not None:
        return int(error.code)
    for exc_type, status in EXCEPTION_STATUS_MAP.items():
        if isinstance(error, exc_type):
            return int(status)
    return int(default)


__all__ = [
    "EXCEPTION_STATUS_MAP",
    "AppError",
    "AuthError",
    "NotFoundError",
    "map_exception_to_status",
]
