"""发票看板 - 客户模型."""

import uuid

from app import db


class Customer(db.Model):
    """客户模型.

    发票通过 ``customer_id`` 引用客户, 应用本身不提供客户写路径.

    Attributes:
        id: 客户 ID(UUID 文本),主键.
        name: 客户名称.
        email: 联系邮箱.
        image_url: 头像地址.

    """

    __tablename__ = "customers"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    image_url = db.Column(db.String(255), nullable=True)

    def to_option(self) -> dict[str, str]:
        """转换为下拉选项结构."""
        return {"value": self.id, "label": self.name}

    def __repr__(self) -> str:
        return f"<Customer {self.name}>"
