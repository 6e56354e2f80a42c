# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供 monkeypatch 相关的通用 fixtures。
"""

from datetime import date

import pytest

from app.utils.time_utils import time_utils


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - unit tests 不依赖外部 Redis/数据库等基础设施
    - 避免开发者本机环境变量影响测试稳定性
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("CACHE_TYPE", "simple")
    monkeypatch.delenv("CACHE_REDIS_URL", raising=False)


@pytest.fixture
def fixed_today(monkeypatch):
    """把"今天"固定为 2024-05-01, 用于开票日期断言."""
    today = date(2024, 5, 1)
    monkeypatch.setattr(time_utils, "today", lambda: today)
    return today
