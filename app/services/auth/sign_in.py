"""登录边界: 按 provider 名称认证并建立会话.

``sign_in`` 是认证边界的唯一入口, 失败时统一抛出带类型标签的 ``AuthError``:
- ``CredentialsSignin``: 凭据格式错误、用户不存在或密码不匹配
- ``InvalidProvider``: 未注册的 provider 名称
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from flask_login import login_user

from app.constants import AuthErrorType, ErrorMessages
from app.core.exceptions import AuthError
from app.models.user import User
from app.repositories.users_repository import UsersRepository
from app.schemas.auth import CredentialsPayload
from app.schemas.validation import validate_form
from app.utils.structlog_config import get_auth_logger

CREDENTIALS_PROVIDER = "credentials"

auth_logger = get_auth_logger()


class SignInProvider(Protocol):
    """认证 provider 协议."""

    def authorize(self, credentials: object) -> User:
        """校验凭据并返回用户, 失败时抛出 AuthError."""
        ...


class CredentialsProvider:
    """邮箱 + 密码认证."""

    def __init__(self, repository: UsersRepository | None = None) -> None:
        self._repository = repository or UsersRepository()

    def authorize(self, credentials: object) -> User:
        validation = validate_form(CredentialsPayload, credentials, message=ErrorMessages.INVALID_CREDENTIALS)
        if validation.data is None:
            raise AuthError(
                AuthErrorType.CREDENTIALS_SIGNIN,
                "登录凭据格式不合法",
                extra={"fields": sorted(validation.field_errors)},
            )

        user = self._repository.get_by_email(validation.data.email)
        if user is None or not user.check_password(validation.data.password):
            raise AuthError(AuthErrorType.CREDENTIALS_SIGNIN, "邮箱或密码错误")
        return user


def default_providers() -> dict[str, SignInProvider]:
    return {CREDENTIALS_PROVIDER: CredentialsProvider()}


def sign_in(
    provider_name: str,
    credentials: object,
    *,
    remember: bool = False,
    providers: Mapping[str, SignInProvider] | None = None,
) -> User:
    """认证并写入登录会话.

    Args:
        provider_name: provider 名称, 目前仅支持 ``credentials``.
        credentials: 原始凭据(表单或 mapping).
        remember: 是否写入"记住我" cookie.
        providers: 可选的 provider 注册表, 默认使用内置 provider.

    Returns:
        User: 已登录的用户.

    Raises:
        AuthError: 认证失败, ``type`` 标识失败类型.

    """
    registry = providers if providers is not None else default_providers()
    provider = registry.get(provider_name)
    if provider is None:
        raise AuthError(AuthErrorType.INVALID_PROVIDER, f"未知的认证 provider: {provider_name}")

    user = provider.authorize(credentials)
    login_user(user, remember=remember)
    auth_logger.info("用户登录成功", module="auth", user_id=user.id, provider=provider_name)
    return user
