"""发票看板 - 应用工厂.

`create_app()` 依次完成: 写入配置 -> 会话 Cookie -> 扩展 -> 蓝图 -> 日志 ->
全局错误页 -> 模板过滤器. 扩展实例在模块级创建, 供服务层与模型直接导入.
"""

import logging
from datetime import date, datetime
from functools import lru_cache
from importlib import import_module
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from flask import Flask, jsonify, render_template, request
from flask.typing import ResponseReturnValue
from flask_bcrypt import Bcrypt
from flask_caching import Cache
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from werkzeug.exceptions import HTTPException

from app.constants import ErrorMessages, HttpStatus
from app.errors import map_exception_to_status
from app.settings import Settings
from app.types.extensions import InvoiceDashboardFlask, InvoiceDashboardLoginManager
from app.utils.cache_utils import init_cache_manager
from app.utils.structlog_config import configure_structlog, get_system_logger, log_error
from app.utils.time_utils import time_utils

if TYPE_CHECKING:
    from app.models.user import User

db = SQLAlchemy()
migrate = Migrate()
cache = Cache()
bcrypt = Bcrypt()
csrf = CSRFProtect()
login_manager: InvoiceDashboardLoginManager = InvoiceDashboardLoginManager()

# (模块, 蓝图属性, URL 前缀)
BLUEPRINTS: tuple[tuple[str, str, str | None], ...] = (
    ("app.routes.main", "main_bp", None),
    ("app.routes.auth", "auth_bp", None),
    ("app.routes.invoices", "invoices_bp", "/dashboard/invoices"),
)


@lru_cache(maxsize=1)
def _user_model() -> type["User"]:
    return import_module("app.models.user").User


def create_app(*, settings: Settings | None = None) -> InvoiceDashboardFlask:
    """构建发票看板应用.

    Args:
        settings: 预先构造的配置; 缺省时调用 `Settings.load()` 读取环境.

    Returns:
        InvoiceDashboardFlask: 已注册扩展与蓝图的应用.

    """
    settings = settings or Settings.load()
    app = InvoiceDashboardFlask(__name__)
    app.settings = settings
    app.config.from_mapping(settings.to_flask_config())
    app.config.update(
        SESSION_COOKIE_NAME="invoices_session",
        SESSION_COOKIE_SECURE=settings.is_production,
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Lax",
    )

    _init_extensions(app, settings)
    for module_path, attr_name, prefix in BLUEPRINTS:
        app.register_blueprint(getattr(import_module(module_path), attr_name), url_prefix=prefix)

    _init_logging(app)
    _register_error_page(app)
    _register_filters(app)
    return app


def _init_extensions(app: Flask, settings: Settings) -> None:
    db.init_app(app)
    migrate.init_app(app, db)
    cache.init_app(app)
    init_cache_manager(cache, default_timeout=settings.cache_default_timeout_seconds)
    csrf.init_app(app)
    bcrypt.init_app(app)

    login_manager.init_app(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message = ErrorMessages.AUTHENTICATION_REQUIRED
    login_manager.login_message_category = "info"
    login_manager.session_protection = "basic"
    login_manager.remember_cookie_duration = settings.remember_cookie_duration_seconds
    login_manager.remember_cookie_httponly = True

    @login_manager.user_loader
    def load_user(user_id: str) -> "User | None":
        return db.session.get(_user_model(), user_id)


def _init_logging(app: Flask) -> None:
    """structlog 始终启用; 滚动文件仅在非调试/非测试环境挂载."""
    configure_structlog(app)
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if app.debug or app.testing or app.config.get("ENV") in {"testing", "test"}:
        return

    log_path = Path(app.config["LOG_FILE"])
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=app.config["LOG_MAX_SIZE"],
        backupCount=app.config["LOG_BACKUP_COUNT"],
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(level)
    root_logger.addHandler(handler)
    get_system_logger().info("发票看板应用启动", log_file=str(log_path))


def _register_error_page(app: Flask) -> None:
    """未被服务层消化的异常在此记录, 并渲染错误页(或按 Accept 返回 JSON)."""

    @app.errorhandler(Exception)
    def render_unhandled(error: Exception) -> ResponseReturnValue:
        # 3xx 重定向类异常原样放行
        if isinstance(error, HTTPException) and error.code is not None and error.code < HttpStatus.BAD_REQUEST:
            return error

        status_code = map_exception_to_status(error)
        if status_code >= HttpStatus.INTERNAL_SERVER_ERROR:
            log_error("未处理的请求异常", module="system", exception=error, status_code=status_code)
            message = ErrorMessages.INTERNAL_ERROR
        elif isinstance(error, HTTPException):
            message = error.description or ErrorMessages.INTERNAL_ERROR
        else:
            message = str(error)

        if request.accept_mimetypes.best == "application/json":
            return jsonify({"error": True, "message": message}), status_code
        return render_template("errors/error.html", status_code=status_code, message=message), status_code


def _register_filters(app: Flask) -> None:
    @app.template_filter("currency")
    def currency_filter(amount_in_cents: int | None) -> str:
        """分 -> "$1,234.56"."""
        return f"${int(amount_in_cents or 0) / 100:,.2f}"

    @app.template_filter("date_display")
    def date_display_filter(value: str | date | datetime | None) -> str:
        return time_utils.format_date(value)


from app.models import customer, invoice, user  # noqa: F401, E402
