"""发票看板的结构化日志.

`configure_structlog(app)` 在应用工厂中调用一次; 业务代码只使用
`log_info` / `log_warning` / `log_error` 或 `get_*_logger()`.
每条事件都会带上 request_id、路径、当前用户与应用版本.
"""

from __future__ import annotations

import sys
import uuid
from contextlib import suppress
from typing import TYPE_CHECKING, cast

import structlog
from flask import Flask, current_app, has_request_context, request
from flask_login import current_user

from app.settings import APP_VERSION
from app.types import JsonValue, LoggerExtra, StructlogEventDict
from app.utils.logging.context_vars import request_id_var

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

LogField = JsonValue | LoggerExtra

_state = {"configured": False}


def _inject_request(_logger: BindableLogger, _name: str, event: StructlogEventDict) -> StructlogEventDict:
    if has_request_context():
        event.update(request_id=request_id_var.get(), path=request.path, method=request.method)
    return event


def _inject_user(_logger: BindableLogger, _name: str, event: StructlogEventDict) -> StructlogEventDict:
    # 应用上下文之外访问 current_user 会抛 RuntimeError
    with suppress(RuntimeError, AttributeError):
        if current_user and current_user.is_authenticated:
            event["current_user_id"] = current_user.get_id()
    return event


def _inject_app(logger: BindableLogger, _name: str, event: StructlogEventDict) -> StructlogEventDict:
    try:
        config = current_app.config
        event["app_name"] = config["APP_NAME"]
        event["app_version"] = config["APP_VERSION"]
    except (RuntimeError, KeyError):
        event["app_name"] = "Invoice Dashboard"
        event["app_version"] = APP_VERSION
    event["logger_name"] = getattr(logger, "name", "unknown")
    return event


def _build_processors() -> list[Processor]:
    renderer: Processor = (
        structlog.dev.ConsoleRenderer(colors=True) if sys.stdout.isatty() else structlog.processors.JSONRenderer()
    )
    return [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        cast("Processor", _inject_request),
        cast("Processor", _inject_user),
        cast("Processor", _inject_app),
        renderer,
    ]


def _ensure_configured() -> None:
    if _state["configured"]:
        return
    structlog.configure(
        processors=_build_processors(),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _state["configured"] = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """返回名为 `name` 的 structlog logger, 首次调用时完成全局配置."""
    _ensure_configured()
    return structlog.get_logger(name)


def configure_structlog(app: Flask) -> None:
    """配置 structlog, 并为 app 注册请求 ID 与异常收尾钩子.

    Args:
        app: Flask 应用实例.

    """
    _ensure_configured()

    @app.before_request
    def assign_request_id() -> None:
        request_id_var.set(uuid.uuid4().hex)

    @app.teardown_request
    def reset_request_id(_exception: BaseException | None) -> None:
        request_id_var.set(None)

    @app.teardown_appcontext
    def report_teardown_exception(exception: BaseException | None) -> None:
        if exception is not None:
            get_logger("app").error("请求收尾时出现异常", module="system", exception=str(exception))


def log_info(message: str, module: str = "app", **kwargs: LogField) -> None:
    """INFO 级业务日志, 例: `log_info("发票已创建", module="invoices", invoice_id=...)`."""
    get_logger("app").info(message, module=module, **kwargs)


def log_warning(message: str, module: str = "app", exception: Exception | None = None, **kwargs: LogField) -> None:
    if exception is not None:
        kwargs["exception"] = str(exception)
    get_logger("app").warning(message, module=module, **kwargs)


def log_error(message: str, module: str = "app", exception: Exception | None = None, **kwargs: LogField) -> None:
    """ERROR 级日志; 传入 exception 时附带异常类型与堆栈.

    Args:
        message: 日志消息.
        module: 业务模块名.
        exception: 触发日志的异常, 可选.
        **kwargs: 附加的结构化字段.

    """
    logger = get_logger("app")
    if exception is None:
        logger.error(message, module=module, **kwargs)
        return
    logger.error(
        message,
        module=module,
        error=str(exception),
        error_type=type(exception).__name__,
        exc_info=exception,
        **kwargs,
    )


def get_system_logger() -> structlog.stdlib.BoundLogger:
    return get_logger("system")


def get_auth_logger() -> structlog.stdlib.BoundLogger:
    return get_logger("auth")


__all__ = [
    "configure_structlog",
    "get_auth_logger",
    "get_logger",
    "get_system_logger",
    "log_error",
    "log_info",
    "log_warning",
]
