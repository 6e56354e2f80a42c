# tests/unit/routes/conftest.py
"""路由测试专用 fixtures.

提供内存 SQLite 应用、测试客户端与已登录会话。
"""

import pytest

from app import bcrypt, create_app, db
from app.models.customer import Customer
from app.models.user import User
from app.settings import Settings


@pytest.fixture(scope="function")
def app(monkeypatch):
    """创建测试应用实例并建表."""
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("CACHE_TYPE", "simple")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("BCRYPT_LOG_ROUNDS", "4")
    monkeypatch.delenv("CACHE_REDIS_URL", raising=False)

    settings = Settings.load()
    app = create_app(settings=settings)
    app.config["TESTING"] = True
    app.config["WTF_CSRF_ENABLED"] = False

    with app.app_context():
        db.create_all()
        db.session.add_all(
            [
                Customer(id="cust-1", name="Evil Rabbit", email="evil@rabbit.com"),
                Customer(id="cust-2", name="Delba de Oliveira", email="delba@oliveira.com"),
            ],
        )
        db.session.add(
            User(
                id="user-1",
                name="User",
                email="user@nextmail.com",
                password=bcrypt.generate_password_hash("123456", rounds=4).decode("utf-8"),
            ),
        )
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    """创建测试客户端."""
    return app.test_client()


@pytest.fixture(scope="function")
def auth_client(app):
    """创建已认证的测试客户端."""
    client = app.test_client()
    with client.session_transaction() as session:
        session["_user_id"] = "user-1"
        session["_fresh"] = True
    return client
