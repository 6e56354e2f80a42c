"""页面视图缓存.

目标:
- 以站内路径为粒度缓存列表页数据, 写操作成功后按路径整体失效
- 失效通过递增路径的 generation 实现, 旧 generation 的缓存项自然过期, 不依赖模式删除
- 未初始化缓存管理器时视为"未启用缓存", 读取直接穿透到数据源
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from flask import current_app, has_app_context

from app.settings import DEFAULT_INVOICE_LIST_CACHE_TTL_SECONDS
from app.utils.cache_utils import CacheManager, CacheManagerRegistry
from app.utils.structlog_config import log_info

T = TypeVar("T")

_VIEW_KEY_PREFIX = "invoices:v1:view"


class ViewCacheService:
    """按路径失效的视图缓存访问器."""

    def __init__(self, *, manager: CacheManager | None = None) -> None:
        self._manager = manager

    def _get_manager(self) -> CacheManager | None:
        if self._manager is not None:
            return self._manager
        try:
            return CacheManagerRegistry.get()
        except RuntimeError:
            return None

    @staticmethod
    def _get_ttl_seconds() -> int:
        if has_app_context():
            ttl_raw = current_app.config.get("INVOICE_LIST_CACHE_TTL")
            if isinstance(ttl_raw, int) and ttl_raw >= 0:
                return ttl_raw
        return DEFAULT_INVOICE_LIST_CACHE_TTL_SECONDS

    @staticmethod
    def _generation_key(path: str) -> str:
        return f"{_VIEW_KEY_PREFIX}:generation:{path}"

    def current_generation(self, path: str) -> int:
        manager = self._get_manager()
        if not manager:
            return 0
        cached = manager.get(self._generation_key(path))
        return cached if isinstance(cached, int) else 0

    def invalidate(self, path: str) -> int:
        """使指定路径下的全部视图缓存失效.

        Args:
            path: 站内路径, 例如 ``/dashboard/invoices``.

        Returns:
            int: 失效后的 generation, 未启用缓存时返回 0.

        """
        manager = self._get_manager()
        if not manager:
            return 0
        generation = self.current_generation(path) + 1
        manager.set(self._generation_key(path), generation, timeout=0)
        log_info("视图缓存已失效", module="cache", path=path, generation=generation)
        return generation

    def get_or_set(self, path: str, loader: Callable[[], T], **params: Any) -> T:
        """读取路径缓存, 缺失时调用 loader 并写入.

        Args:
            path: 缓存所属路径.
            loader: 缓存缺失时的数据加载函数, 返回值需可序列化.
            **params: 影响结果的查询参数, 参与缓存键计算.

        Returns:
            缓存值或 loader 的返回值.

        """
        manager = self._get_manager()
        ttl = self._get_ttl_seconds()
        if not manager or ttl == 0:
            return loader()
        key = manager.build_key(
            f"{_VIEW_KEY_PREFIX}:{path}",
            generation=self.current_generation(path),
            **params,
        )
        return manager.get_or_set(key, loader, timeout=ttl)
