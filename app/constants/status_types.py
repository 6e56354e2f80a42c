"""状态类型常量.

定义发票状态值,避免魔法字符串.
"""

from typing import ClassVar


class InvoiceStatus:
    """发票状态常量."""

    PENDING = "pending"  # 待支付
    PAID = "paid"  # 已支付

    ALL: ClassVar[tuple[str, ...]] = (PENDING, PAID)

    @classmethod
    def is_valid(cls, status: str) -> bool:
        """判断状态值是否合法.

        Args:
            status: 状态字符串.

        Returns:
            bool: 属于 pending/paid 时返回 True.

        """
        return status in cls.ALL
