"""客户 Repository.

职责:
- 仅负责客户下拉选项的读取
- 不做序列化、不返回 Response、不 commit
"""

from __future__ import annotations

from sqlalchemy import select

from app import db
from app.models.customer import Customer


class CustomersRepository:
    """客户查询 Repository."""

    def list_options(self) -> list[dict[str, str]]:
        customers = db.session.execute(select(Customer).order_by(Customer.name.asc())).scalars()
        return [customer.to_option() for customer in customers]
