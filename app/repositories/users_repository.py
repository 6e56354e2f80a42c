"""用户 Repository.

职责:
- 负责按邮箱读取用户(read)
- 注册时执行单条参数化 insert(write)
- 提供 commit/rollback, 由 service 决定事务边界
"""

from __future__ import annotations

from sqlalchemy import insert, select

from app import db
from app.models.user import User


class UsersRepository:
    """用户查询 Repository."""

    def get_by_id(self, user_id: str) -> User | None:
        return db.session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        normalized = (email or "").strip()
        if not normalized:
            return None
        return db.session.execute(select(User).where(User.email == normalized)).scalar_one_or_none()

    def insert(self, *, name: str, email: str, password_hash: str) -> None:
        db.session.execute(insert(User).values(name=name, email=email, password=password_hash))

    @staticmethod
    def commit() -> None:
        db.session.commit()

    @staticmethod
    def rollback() -> None:
        db.session.rollback()
