"""站内路径常量.

缓存失效与重定向均以路径作为标识,集中定义避免拼写不一致.
"""

from typing import Final


class RoutePaths:
    """站内路径常量."""

    INVOICES: Final[str] = "/dashboard/invoices"
    LOGIN: Final[str] = "/login"
