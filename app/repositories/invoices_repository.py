"""发票 Repository.

职责:
- 负责 Query 组装与数据库读取(read)
- 每次写操作只执行一条参数化语句(insert/update/delete)(write)
- 提供 commit/rollback, 由 service 决定事务边界
- 不做序列化、不返回 Response
"""

from __future__ import annotations

import math
from datetime import date
from typing import Any, cast

from sqlalchemy import String, delete, func, insert, or_, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.sql.elements import ColumnElement

from app import db
from app.models.customer import Customer
from app.models.invoice import Invoice
from app.types.invoices import InvoicePage


class InvoicesRepository:
    """发票查询与写入 Repository."""

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        return db.session.get(Invoice, invoice_id)

    def insert(self, *, customer_id: str, amount: int, status: str, invoice_date: date) -> None:
        stmt = insert(Invoice).values(
            customer_id=customer_id,
            amount=amount,
            status=status,
            date=invoice_date,
        )
        db.session.execute(stmt)

    def update(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> int:
        """覆盖更新发票, 不做存在性或版本检查.

        Returns:
            int: 受影响行数.

        """
        stmt = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status)
            .execution_options(synchronize_session=False)
        )
        result = cast(CursorResult[Any], db.session.execute(stmt))
        return int(result.rowcount or 0)

    def delete(self, invoice_id: str) -> int:
        stmt = delete(Invoice).where(Invoice.id == invoice_id).execution_options(synchronize_session=False)
        result = cast(CursorResult[Any], db.session.execute(stmt))
        return int(result.rowcount or 0)

    @staticmethod
    def commit() -> None:
        db.session.commit()

    @staticmethod
    def rollback() -> None:
        db.session.rollback()

    def list_page(self, *, search: str, page: int, per_page: int) -> InvoicePage[dict[str, Any]]:
        """按关键字分页查询发票列表.

        关键字匹配客户名称、客户邮箱、状态、金额(分)与日期文本.

        Args:
            search: 搜索关键字, 空字符串表示不过滤.
            page: 页码, 从 1 开始.
            per_page: 每页条数.

        Returns:
            InvoicePage[dict[str, Any]]: 行为普通 dict, 可直接写入缓存.

        """
        customer_name = cast(ColumnElement[str], Customer.name)
        customer_email = cast(ColumnElement[str], Customer.email)
        stmt = select(
            Invoice.id.label("id"),
            Invoice.customer_id.label("customer_id"),
            Invoice.amount.label("amount"),
            Invoice.status.label("status"),
            Invoice.date.label("date"),
            customer_name.label("name"),
            customer_email.label("email"),
            Customer.image_url.label("image_url"),
        ).join(Customer, Invoice.customer_id == Customer.id)

        normalized_search = (search or "").strip()
        if normalized_search:
            like_pattern = f"%{normalized_search}%"
            stmt = stmt.where(
                or_(
                    customer_name.ilike(like_pattern),
                    customer_email.ilike(like_pattern),
                    Invoice.status.ilike(like_pattern),
                    Invoice.amount.cast(String).ilike(like_pattern),
                    Invoice.date.cast(String).ilike(like_pattern),
                ),
            )

        total = int(db.session.execute(select(func.count()).select_from(stmt.subquery())).scalar_one() or 0)
        pages = max(math.ceil(total / per_page), 1) if per_page > 0 else 1
        current_page = min(max(page, 1), pages)

        rows = db.session.execute(
            stmt.order_by(Invoice.date.desc(), Invoice.id.asc())
            .limit(per_page)
            .offset((current_page - 1) * per_page),
        ).mappings()
        return InvoicePage(
            items=[dict(row) for row in rows],
            total=total,
            page=current_page,
            pages=pages,
            limit=per_page,
        )
