"""发票写操作 Service.

职责:
- 处理发票的创建/更新/删除编排
- 负责表单校验与金额换算
- 调用 repository 执行单条语句并提交
- 写入成功后失效发票列表视图缓存
- 不返回 Response, 结果以 ActionResult 表达
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from app.constants import FormMessages, RoutePaths
from app.repositories.invoices_repository import InvoicesRepository
from app.schemas.invoices import InvoiceFormPayload
from app.schemas.validation import validate_form
from app.services.cache.view_cache_service import ViewCacheService
from app.services.common.action_result import ActionResult
from app.utils.structlog_config import log_error, log_info, log_warning
from app.utils.time_utils import time_utils


class InvoiceWriteService:
    """发票写操作服务."""

    def __init__(
        self,
        repository: InvoicesRepository | None = None,
        *,
        view_cache: ViewCacheService | None = None,
    ) -> None:
        """初始化服务并注入发票仓库与视图缓存."""
        self._repository = repository or InvoicesRepository()
        self._view_cache = view_cache or ViewCacheService()

    def create(self, payload: object) -> ActionResult:
        """创建发票, 开票日期为当天."""
        validation = validate_form(InvoiceFormPayload, payload, message=FormMessages.CREATE_INVOICE_MISSING_FIELDS)
        if validation.data is None:
            return ActionResult.from_validation(validation)

        fields = validation.data
        amount = fields.amount_in_cents
        invoice_date = time_utils.today()
        try:
            self._repository.insert(
                customer_id=fields.customer_id,
                amount=amount,
                status=fields.status,
                invoice_date=invoice_date,
            )
            self._repository.commit()
        except SQLAlchemyError as exc:
            self._repository.rollback()
            log_error("创建发票失败", module="invoices", exception=exc, customer_id=fields.customer_id)
            return ActionResult.failed(FormMessages.CREATE_INVOICE_DATABASE_ERROR)

        self._view_cache.invalidate(RoutePaths.INVOICES)
        log_info(
            "创建发票成功",
            module="invoices",
            customer_id=fields.customer_id,
            amount=amount,
            status=fields.status,
            date=invoice_date.isoformat(),
        )
        return ActionResult.redirect(RoutePaths.INVOICES)

    def update(self, invoice_id: str, payload: object) -> ActionResult:
        """覆盖更新发票, 开票日期保持不变."""
        validation = validate_form(InvoiceFormPayload, payload, message=FormMessages.UPDATE_INVOICE_MISSING_FIELDS)
        if validation.data is None:
            return ActionResult.from_validation(validation)

        fields = validation.data
        amount = fields.amount_in_cents
        try:
            affected = self._repository.update(
                invoice_id,
                customer_id=fields.customer_id,
                amount=amount,
                status=fields.status,
            )
            self._repository.commit()
        except SQLAlchemyError as exc:
            self._repository.rollback()
            log_error("更新发票失败", module="invoices", exception=exc, invoice_id=invoice_id)
            return ActionResult.failed(FormMessages.UPDATE_INVOICE_DATABASE_ERROR)

        if affected == 0:
            log_warning("更新发票未命中任何记录", module="invoices", invoice_id=invoice_id)

        self._view_cache.invalidate(RoutePaths.INVOICES)
        log_info(
            "更新发票成功",
            module="invoices",
            invoice_id=invoice_id,
            customer_id=fields.customer_id,
            amount=amount,
            status=fields.status,
        )
        return ActionResult.redirect(RoutePaths.INVOICES)

    def delete(self, invoice_id: str) -> ActionResult:
        """删除发票, 记录不存在时同样视为成功."""
        try:
            affected = self._repository.delete(invoice_id)
            self._repository.commit()
        except SQLAlchemyError as exc:
            self._repository.rollback()
            log_error("删除发票失败", module="invoices", exception=exc, invoice_id=invoice_id)
            return ActionResult.failed(FormMessages.DELETE_INVOICE_DATABASE_ERROR)

        self._view_cache.invalidate(RoutePaths.INVOICES)
        log_info("删除发票", module="invoices", invoice_id=invoice_id, affected=affected)
        return ActionResult.redirect(RoutePaths.INVOICES)
