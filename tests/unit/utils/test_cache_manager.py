import pytest
from flask import Flask
from flask_caching import Cache

from app.utils.cache_utils import CacheManager


class _BrokenCache:
    def get(self, key):
        raise ConnectionError("redis down")

    def set(self, key, value, timeout=None):
        raise ConnectionError("redis down")


@pytest.mark.unit
def test_build_key_is_stable_and_prefixed() -> None:
    manager = CacheManager(_BrokenCache())  # type: ignore[arg-type]

    first = manager.build_key("invoices", page=1, search="paid")
    second = manager.build_key("invoices", search="paid", page=1)

    assert first == second
    assert first.startswith("invoices:")
    assert first != manager.build_key("invoices", page=2, search="paid")


@pytest.mark.unit
def test_backend_failures_degrade_to_miss() -> None:
    manager = CacheManager(_BrokenCache())  # type: ignore[arg-type]

    assert manager.get("k") is None
    assert manager.set("k", 1) is False
    assert manager.get_or_set("k", lambda: "computed") == "computed"


@pytest.mark.unit
def test_zero_timeout_is_passed_through() -> None:
    flask_app = Flask(__name__)
    cache = Cache(flask_app, config={"CACHE_TYPE": "SimpleCache", "CACHE_DEFAULT_TIMEOUT": 1})
    with flask_app.app_context():
        manager = CacheManager(cache, default_timeout=1)
        assert manager.set("generation", 3, timeout=0)
        assert manager.get("generation") == 3
