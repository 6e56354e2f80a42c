"""发票看板 - 业务异常定义.

说明:
- 这里只定义异常类型与语义字段, HTTP 状态码映射见 `app/errors/__init__.py`.
- 表单校验失败与持久化失败是预期结果, 由 service 以 ActionResult 返回, 不走异常通道.
- 只有认证边界与资源缺失会抛出异常.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from app.constants.system_constants import AuthErrorType, ErrorMessages

if TYPE_CHECKING:
    from app.types import LoggerExtra


class AppError(Exception):
    """业务异常基类.

    未传入 ``message`` 时按 ``message_key`` 从 ErrorMessages 取固定文案.
    """

    default_message_key: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
    ) -> None:
        self.message_key = message_key or self.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        super().__init__(self.message)


class AuthError(AppError):
    """登录边界抛出的认证失败.

    ``type`` 为失败类型标签, 调用方只依据该标签决定展示给用户的文案.

    Attributes:
        type: 失败类型, 例如 ``CredentialsSignin``.

    """

    default_message_key = "INVALID_CREDENTIALS"

    def __init__(
        self,
        type: str = AuthErrorType.CREDENTIALS_SIGNIN,  # noqa: A002
        message: str | None = None,
        *,
        extra: LoggerExtra | None = None,
    ) -> None:
        """初始化认证异常.

        Args:
            type: 失败类型标签.
            message: 可选的内部描述, 仅用于日志.
            extra: 结构化日志附加字段.

        """
        self.type = type
        super().__init__(message or f"认证失败: {type}", extra=extra)


class NotFoundError(AppError):
    """编辑/读取的发票等资源不存在."""

    default_message_key = "RESOURCE_NOT_FOUND"


__all__ = [
    "AppError",
    "AuthError",
    "NotFoundError",
]
