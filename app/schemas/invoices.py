"""发票写路径 schema."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Literal

from pydantic import Field, field_validator

from app.constants import InvoiceStatus
from app.constants.validation_limits import AMOUNT_MAX_MINOR_UNITS, AMOUNT_MINOR_UNITS_FACTOR
from app.schemas.base import PayloadSchema

InvoiceStatusValue = Literal["pending", "paid"]

_AMOUNT_MAX = Decimal(AMOUNT_MAX_MINOR_UNITS) / AMOUNT_MINOR_UNITS_FACTOR


def to_minor_units(amount: Decimal) -> int:
    """主货币单位金额换算为最小货币单位(分), 四舍五入到整数."""
    return int((amount * AMOUNT_MINOR_UNITS_FACTOR).to_integral_value(rounding=ROUND_HALF_UP))


def _parse_amount(value: Any) -> Decimal:
    # 空值按 0 处理, 随后由 "> 0" 规则拒绝
    if value is None or (isinstance(value, str) and not value.strip()):
        value = 0
    if isinstance(value, bool):
        raise ValueError("Amount must be a number")
    text = str(value).strip()
    if "_" in text:
        raise ValueError("Amount must be a number")
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError("Amount must be a number") from None
    if not amount.is_finite():
        raise ValueError("Amount must be a number")
    if amount <= 0:
        raise ValueError("Amount must be greater than 0")
    # 先比较再换算, 超大指数不会进入乘法
    if amount > _AMOUNT_MAX:
        raise ValueError("Amount is too large")
    if to_minor_units(amount) < 1:
        raise ValueError("Amount must be greater than 0")
    return amount


class InvoiceFormPayload(PayloadSchema):
    """创建/编辑发票 payload.

    金额为主货币单位(美元), 换算后的分值须落在 1 与整型列上限之间.
    """

    customer_id: str = Field(default="", alias="customerId", validate_default=True)
    amount: Decimal = Field(default=Decimal(0), validate_default=True)
    status: InvoiceStatusValue = Field(default="", validate_default=True)  # type: ignore[assignment]

    @field_validator("customer_id", mode="before")
    @classmethod
    def _validate_customer_id(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Customer name is required")
        return value.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def _validate_amount(cls, value: Any) -> Decimal:
        return _parse_amount(value)

    @field_validator("status", mode="before")
    @classmethod
    def _validate_status(cls, value: Any) -> str:
        if not isinstance(value, str) or not InvoiceStatus.is_valid(value):
            raise ValueError("Invoice Status is required")
        return value

    @property
    def amount_in_cents(self) -> int:
        return to_minor_units(self.amount)
