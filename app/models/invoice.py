"""发票看板 - 发票模型."""

import uuid

from app import db
from app.constants import InvoiceStatus


class Invoice(db.Model):
    """发票模型.

    金额以最小货币单位(分)存储, 避免浮点误差.

    Attributes:
        id: 发票 ID(UUID 文本),主键.
        customer_id: 客户 ID,外键.
        amount: 金额(分),必须大于 0.
        status: 状态,可选值:pending、paid.
        date: 开票日期,创建时写入当天.

    """

    __tablename__ = "invoices"
    __table_args__ = (
        db.CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
        db.CheckConstraint(
            "status IN ('{}')".format("', '".join(InvoiceStatus.ALL)),
            name="ck_invoices_status",
        ),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = db.Column(db.String(36), db.ForeignKey("customers.id"), nullable=False, index=True)
    amount = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=InvoiceStatus.PENDING)
    date = db.Column(db.Date, nullable=False)

    customer = db.relationship("Customer", lazy="joined")

    def to_form_data(self) -> dict[str, str]:
        """转换为编辑表单的初始值.

        Returns:
            dict[str, str]: 与表单字段同名的字符串字典, 金额换算回元.

        """
        return {
            "customerId": self.customer_id,
            "amount": f"{self.amount / 100:.2f}",
            "status": self.status,
        }

    def __repr__(self) -> str:
        return f"<Invoice {self.id} {self.status}>"
