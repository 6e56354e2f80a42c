"""发票看板 - 运行时配置.

配置来自环境变量与可选的 `.env`, 由 `Settings.load()` 一次性读取并校验;
`create_app(settings=...)` 只消费 Settings, 其余模块从 `app.config` 取值.

production 下缺失 SECRET_KEY / DATABASE_URL 会直接抛出 ValueError,
其它环境分别回退为随机密钥与项目内的 SQLite 文件.
"""

from __future__ import annotations

import logging
import secrets
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.constants.validation_limits import (
    BCRYPT_LOG_ROUNDS_DEFAULT,
    BCRYPT_LOG_ROUNDS_MIN,
    INVOICES_PER_PAGE_DEFAULT,
)

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"
SQLITE_FALLBACK_PATH = PROJECT_ROOT / "userdata" / "invoices_dev.db"

APP_VERSION = "1.0.0"

DEFAULT_INVOICE_LIST_CACHE_TTL_SECONDS = 300
DEFAULT_CACHE_REDIS_URL = "redis://localhost:6379/0"
# CACHE_TYPE 取值 -> Flask-Caching 后端名
CACHE_BACKENDS: dict[str, str] = {"simple": "SimpleCache", "redis": "RedisCache"}


class Settings(BaseSettings):
    """发票看板的运行时设置."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    environment: str = Field(default="development", validation_alias="FLASK_ENV")
    debug: bool = Field(default=False, validation_alias="FLASK_DEBUG")
    app_name: str = Field(default="Invoice Dashboard", validation_alias="APP_NAME")

    secret_key: str = Field(default="", validation_alias="SECRET_KEY")
    database_url: str = Field(default="", validation_alias="DATABASE_URL")

    cache_type: str = Field(default="simple", validation_alias="CACHE_TYPE")
    cache_redis_url: str | None = Field(default=None, validation_alias="CACHE_REDIS_URL")
    cache_default_timeout_seconds: int = Field(default=300, validation_alias="CACHE_DEFAULT_TIMEOUT")
    invoice_list_cache_ttl_seconds: int = Field(
        default=DEFAULT_INVOICE_LIST_CACHE_TTL_SECONDS,
        validation_alias="INVOICE_LIST_CACHE_TTL",
    )

    bcrypt_log_rounds: int = Field(default=BCRYPT_LOG_ROUNDS_DEFAULT, validation_alias="BCRYPT_LOG_ROUNDS")
    invoices_per_page: int = Field(default=INVOICES_PER_PAGE_DEFAULT, validation_alias="INVOICES_PER_PAGE")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="userdata/logs/app.log", validation_alias="LOG_FILE")
    log_max_size_bytes: int = Field(default=10 * 1024 * 1024, validation_alias="LOG_MAX_SIZE")
    log_backup_count: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    session_lifetime_seconds: int = Field(default=3600, validation_alias="PERMANENT_SESSION_LIFETIME")
    remember_cookie_duration_seconds: int = Field(
        default=7 * 24 * 3600,
        validation_alias="REMEMBER_COOKIE_DURATION",
    )

    @field_validator("cache_type", "environment")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def _uppercase(cls, value: str) -> str:
        return value.upper()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def load(cls) -> Settings:
        """读取 `.env`(存在时, 不覆盖已有环境变量)后构造 Settings."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _fill_defaults(self) -> Settings:
        if "debug" not in self.model_fields_set:
            object.__setattr__(self, "debug", not self.is_production)

        if not self.secret_key:
            if self.is_production:
                raise ValueError("SECRET_KEY environment variable must be set in production")
            object.__setattr__(self, "secret_key", secrets.token_urlsafe(32))
            logger.warning("⚠️  未设置 SECRET_KEY, 使用随机密钥, 重启后会话全部失效")

        if not self.database_url:
            if self.is_production:
                raise ValueError("DATABASE_URL environment variable must be set in production")
            object.__setattr__(self, "database_url", f"sqlite:///{SQLITE_FALLBACK_PATH}")
            if self.environment not in {"testing", "test"}:
                logger.warning("⚠️  未设置 DATABASE_URL, 回退到本地 SQLite (文件名=%s)", SQLITE_FALLBACK_PATH.name)

        if self.cache_type != "redis":
            object.__setattr__(self, "cache_redis_url", None)
        elif not self.cache_redis_url:
            if self.is_production:
                raise ValueError("CACHE_REDIS_URL must be set when CACHE_TYPE=redis in production")
            object.__setattr__(self, "cache_redis_url", DEFAULT_CACHE_REDIS_URL)

        problems = [
            message
            for message, failed in (
                (f"BCRYPT_LOG_ROUNDS 不应小于 {BCRYPT_LOG_ROUNDS_MIN}", self.bcrypt_log_rounds < BCRYPT_LOG_ROUNDS_MIN),
                ("INVOICES_PER_PAGE 必须为正整数", self.invoices_per_page <= 0),
                ("INVOICE_LIST_CACHE_TTL 不能为负数", self.invoice_list_cache_ttl_seconds < 0),
                ("CACHE_TYPE 仅支持 simple/redis", self.cache_type not in CACHE_BACKENDS),
                ("PERMANENT_SESSION_LIFETIME 必须为正整数(秒)", self.session_lifetime_seconds <= 0),
                ("REMEMBER_COOKIE_DURATION 必须为正整数(秒)", self.remember_cookie_duration_seconds <= 0),
            )
            if failed
        ]
        if problems:
            raise ValueError(f"配置校验失败: {'; '.join(problems)}")
        return self

    def to_flask_config(self) -> dict[str, object]:
        """生成写入 `app.config` 的配置字典."""
        engine_options: dict[str, object] = {"pool_pre_ping": True}
        if self.database_url.startswith("sqlite"):
            engine_options["connect_args"] = {"check_same_thread": False}

        config: dict[str, object] = {
            "ENV": self.environment,
            "DEBUG": self.debug,
            "APP_NAME": self.app_name,
            "APP_VERSION": APP_VERSION,
            "SECRET_KEY": self.secret_key,
            "SQLALCHEMY_DATABASE_URI": self.database_url,
            "SQLALCHEMY_TRACK_MODIFICATIONS": False,
            "SQLALCHEMY_ENGINE_OPTIONS": engine_options,
            "CACHE_TYPE": CACHE_BACKENDS[self.cache_type],
            "CACHE_DEFAULT_TIMEOUT": self.cache_default_timeout_seconds,
            "INVOICE_LIST_CACHE_TTL": self.invoice_list_cache_ttl_seconds,
            "INVOICES_PER_PAGE": self.invoices_per_page,
            "BCRYPT_LOG_ROUNDS": self.bcrypt_log_rounds,
            "LOG_LEVEL": self.log_level,
            "LOG_FILE": self.log_file,
            "LOG_MAX_SIZE": self.log_max_size_bytes,
            "LOG_BACKUP_COUNT": self.log_backup_count,
            "PERMANENT_SESSION_LIFETIME": self.session_lifetime_seconds,
            "REMEMBER_COOKIE_DURATION": self.remember_cookie_duration_seconds,
        }
        if self.cache_redis_url:
            config["CACHE_REDIS_URL"] = self.cache_redis_url
        return config
