"""发票看板 - 缓存访问封装.

对 Flask-Caching 做一层薄封装: 后端(如 Redis)不可用时退化为缓存未命中,
列表页照常从数据库读取.
"""

import hashlib
import json
from collections.abc import Callable
from typing import Any

from flask_caching import Cache

from app.utils.structlog_config import get_system_logger


class CacheManager:
    """缓存读写入口.

    Attributes:
        cache: Flask-Caching 实例.
        default_timeout: 未显式指定时的过期时间(秒).

    """

    def __init__(self, cache: Cache, *, default_timeout: int = 300) -> None:
        self.cache = cache
        self.default_timeout = default_timeout
        self.system_logger = get_system_logger()

    @staticmethod
    def build_key(prefix: str, **params: Any) -> str:
        """按前缀与参数生成稳定的缓存键, 参数顺序不影响结果."""
        digest = hashlib.sha256(json.dumps(params, sort_keys=True, default=str).encode()).hexdigest()
        return f"{prefix}:{digest}"

    def get(self, key: str) -> Any | None:
        try:
            return self.cache.get(key)
        except Exception as exc:
            self.system_logger.warning("读取缓存失败", module="cache", key=key, exception=str(exc))
            return None

    def set(self, key: str, value: Any, timeout: int | None = None) -> bool:
        """写入缓存, ``timeout=0`` 表示永不过期, 返回是否写入成功."""
        resolved_timeout = self.default_timeout if timeout is None else timeout
        try:
            self.cache.set(key, value, timeout=resolved_timeout)
        except Exception as exc:
            self.system_logger.warning("写入缓存失败", module="cache", key=key, exception=str(exc))
            return False
        return True

    def get_or_set(self, key: str, loader: Callable[[], Any], timeout: int | None = None) -> Any:
        value = self.get(key)
        if value is None:
            value = loader()
            self.set(key, value, timeout)
        return value


class CacheManagerRegistry:
    """进程内唯一的 CacheManager, 由 create_app 初始化."""

    _manager: CacheManager | None = None

    @classmethod
    def init(cls, cache: Cache, *, default_timeout: int = 300) -> CacheManager:
        cls._manager = CacheManager(cache, default_timeout=default_timeout)
        get_system_logger().info("缓存管理器初始化完成", module="cache", default_timeout=default_timeout)
        return cls._manager

    @classmethod
    def get(cls) -> CacheManager:
        if cls._manager is None:
            msg = "缓存管理器尚未初始化"
            raise RuntimeError(msg)
        return cls._manager


def init_cache_manager(cache: Cache, *, default_timeout: int = 300) -> CacheManager:
    return CacheManagerRegistry.init(cache, default_timeout=default_timeout)
