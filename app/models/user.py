"""users 表."""

import uuid

from flask_login import UserMixin

from app import bcrypt, db


class User(UserMixin, db.Model):
    """登录账号; password 列只保存 bcrypt 哈希."""

    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)

    def check_password(self, password: str) -> bool:
        return bcrypt.check_password_hash(self.password, password)

    def __repr__(self) -> str:
        return f"<User {self.email}>"
