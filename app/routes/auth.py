"""/login /signup /logout 路由; 表单逻辑在 `app.views.auth_forms`."""

from collections.abc import Callable
from typing import cast

from flask import Blueprint, flash, redirect, request, url_for
from flask.typing import ResponseReturnValue
from flask_login import current_user, login_required, logout_user

from app.constants import FlashCategory, FormMessages, HttpMethod
from app.types import RouteReturn
from app.utils.structlog_config import get_auth_logger
from app.views.auth_forms import LoginFormView, SignupFormView

auth_bp = Blueprint("auth", __name__)
auth_logger = get_auth_logger()

FormView = Callable[..., ResponseReturnValue]
_login_form = cast(FormView, LoginFormView.as_view("login"))
_signup_form = cast(FormView, SignupFormView.as_view("signup"))


@auth_bp.route("/login", methods=HttpMethod.FORM_METHODS)
def login() -> RouteReturn:
    """登录页; 已登录用户打开页面时直接进入发票列表, 提交仍交给表单视图."""
    if current_user.is_authenticated and not HttpMethod.is_submit(request.method):
        return redirect(url_for("invoices.index"))
    return _login_form()


auth_bp.add_url_rule("/signup", view_func=_signup_form, methods=HttpMethod.FORM_METHODS, endpoint="signup")


@auth_bp.route("/logout", methods=[HttpMethod.POST])
@login_required
def logout() -> RouteReturn:
    auth_logger.info("用户登出", module="auth", user_id=current_user.get_id(), ip_address=request.remote_addr)
    logout_user()
    flash(FormMessages.LOGGED_OUT, FlashCategory.INFO)
    return redirect(url_for("auth.login"))
