"""登录/注册表单视图."""

from __future__ import annotations

from typing import Any

from flask import current_app, request

from app.constants import FormMessages
from app.constants.validation_limits import BCRYPT_LOG_ROUNDS_DEFAULT
from app.services.auth.login_service import LoginService
from app.services.common.action_result import ActionResult
from app.services.users.signup_service import SignupService
from app.types import TemplateContext
from app.views.mixins.action_forms import ActionFormView


def _resolve_redirect_to() -> str | None:
    """登录成功后的跳转目标, 兼容 Flask-Login 追加的 ``next`` 参数."""
    return request.values.get("redirectTo") or request.args.get("next")


class LoginFormView(ActionFormView):
    """登录页面."""

    template = "auth/login.html"

    def __init__(self) -> None:
        self.service = LoginService()

    def extra_context(self, **kwargs: Any) -> TemplateContext:
        return {"redirect_to": _resolve_redirect_to() or ""}

    def submit(self, payload: object, **kwargs: Any) -> ActionResult:
        return self.service.authenticate(payload, redirect_to=_resolve_redirect_to())


class SignupFormView(ActionFormView):
    """注册页面."""

    template = "auth/signup.html"
    success_message = FormMessages.ACCOUNT_CREATED

    def __init__(self) -> None:
        rounds = current_app.config.get("BCRYPT_LOG_ROUNDS", BCRYPT_LOG_ROUNDS_DEFAULT)
        self.service = SignupService(rounds=int(rounds))

    def submit(self, payload: object, **kwargs: Any) -> ActionResult:
        return self.service.signup(payload)
