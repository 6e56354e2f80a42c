"""登录 Service.

职责:
- 调用登录边界 ``sign_in`` 完成认证
- 把认证失败的类型标签映射为面向用户的固定文案
- 非认证类异常原样抛出, 由全局错误处理器处理
- 登录后跳转只接受站内路径, 其余回退到发票列表
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urlparse

from app.constants import AuthErrorType, ErrorMessages, RoutePaths
from app.core.exceptions import AuthError
from app.models.user import User
from app.services.auth.sign_in import CREDENTIALS_PROVIDER, sign_in
from app.services.common.action_result import ActionResult
from app.utils.structlog_config import get_auth_logger

SignInCallable = Callable[[str, object], User]

auth_logger = get_auth_logger()


def safe_redirect_target(target: str | None) -> str:
    """返回可安全跳转的站内路径, 不合规时回退到发票列表.

    只接受以单个 `/` 开头的相对路径; 含 CR/LF 或反斜杠的目标一律拒绝.
    """
    normalized = (target or "").strip()
    if (
        not normalized.startswith("/")
        or normalized.startswith("//")
        or any(char in normalized for char in "\r\n\\")
    ):
        return RoutePaths.INVOICES
    parsed = urlparse(normalized)
    if parsed.scheme or parsed.netloc:
        return RoutePaths.INVOICES
    return normalized


class LoginService:
    """登录编排服务."""

    def __init__(self, sign_in_func: SignInCallable | None = None) -> None:
        """初始化服务, 允许注入登录边界实现."""
        self._sign_in = sign_in_func or sign_in

    def authenticate(self, credentials: object, *, redirect_to: str | None = None) -> ActionResult:
        """认证凭据.

        Args:
            credentials: 原始凭据(表单或 mapping).
            redirect_to: 登录成功后的跳转目标, 仅接受站内路径.

        Returns:
            ActionResult: 成功为 redirect; 认证失败为 failed 并携带固定文案.

        """
        try:
            self._sign_in(CREDENTIALS_PROVIDER, credentials)
        except AuthError as exc:
            auth_logger.warning("页面登录失败", module="auth", error_type=exc.type, reason=exc.message)
            if exc.type == AuthErrorType.CREDENTIALS_SIGNIN:
                return ActionResult.failed(ErrorMessages.INVALID_CREDENTIALS)
            return ActionResult.failed(ErrorMessages.AUTH_FAILED)

        return ActionResult.redirect(safe_redirect_target(redirect_to))
