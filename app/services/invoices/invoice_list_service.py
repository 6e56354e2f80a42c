"""发票列表 Service.

职责:
- 组织 repository 调用并将行数据转换为稳定 DTO
- 列表页数据经由视图缓存读取, 写操作成功后由写服务失效
- 提供编辑表单所需的发票数据与客户选项
"""

from __future__ import annotations

from typing import Any

from app.constants import RoutePaths
from app.errors import NotFoundError
from app.repositories.customers_repository import CustomersRepository
from app.repositories.invoices_repository import InvoicesRepository
from app.services.cache.view_cache_service import ViewCacheService
from app.types.invoices import InvoiceListFilters, InvoiceListItem, InvoicePage


class InvoiceListService:
    """发票列表业务编排服务."""

    def __init__(
        self,
        repository: InvoicesRepository | None = None,
        *,
        customers_repository: CustomersRepository | None = None,
        view_cache: ViewCacheService | None = None,
    ) -> None:
        """初始化服务并注入仓库与视图缓存."""
        self._repository = repository or InvoicesRepository()
        self._customers_repository = customers_repository or CustomersRepository()
        self._view_cache = view_cache or ViewCacheService()

    def list_invoices(self, filters: InvoiceListFilters) -> InvoicePage[InvoiceListItem]:
        """分页列出发票."""
        page_result: InvoicePage[dict[str, Any]] = self._view_cache.get_or_set(
            RoutePaths.INVOICES,
            lambda: self._repository.list_page(search=filters.search, page=filters.page, per_page=filters.limit),
            search=filters.search,
            page=filters.page,
            limit=filters.limit,
        )

        items = [
            InvoiceListItem(
                id=row["id"],
                customer_id=row["customer_id"],
                name=row["name"],
                email=row["email"],
                image_url=row.get("image_url"),
                amount=int(row["amount"]),
                status=row["status"],
                date=row["date"],
            )
            for row in page_result.items
        ]
        return InvoicePage(
            items=items,
            total=page_result.total,
            page=page_result.page,
            pages=page_result.pages,
            limit=page_result.limit,
        )

    def get_form_data(self, invoice_id: str) -> dict[str, str]:
        """读取编辑表单的初始值.

        Raises:
            NotFoundError: 发票不存在.

        """
        invoice = self._repository.get_by_id(invoice_id)
        if invoice is None:
            raise NotFoundError("Invoice not found.", extra={"invoice_id": invoice_id})
        return invoice.to_form_data()

    def customer_options(self) -> list[dict[str, str]]:
        return self._customers_repository.list_options()
