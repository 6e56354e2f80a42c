"""发票列表相关类型."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, TypeVar

RowT = TypeVar("RowT")


@dataclass(frozen=True, slots=True)
class InvoiceListFilters:
    """发票列表筛选条件."""

    page: int
    limit: int
    search: str


@dataclass(slots=True)
class InvoiceListItem:
    """发票列表单行结构."""

    id: str
    customer_id: str
    name: str
    email: str
    image_url: str | None
    amount: int
    status: str
    date: date


@dataclass(slots=True)
class InvoicePage(Generic[RowT]):
    """一页发票.

    repository 返回 dict 行(可直接写入缓存), service 再转换为 InvoiceListItem.
    ``page`` 为裁剪到 ``[1, pages]`` 之后的实际页码.
    """

    items: list[RowT]
    total: int
    page: int
    pages: int
    limit: int
