"""请求级日志上下文; 由 `configure_structlog` 注册的钩子在每个请求开始时写入."""

from contextvars import ContextVar

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
