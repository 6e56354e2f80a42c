"""发票表单视图."""

from __future__ import annotations

from typing import Any

from app.constants import FormMessages
from app.services.common.action_result import ActionResult
from app.services.invoices.invoice_list_service import InvoiceListService
from app.services.invoices.invoice_write_service import InvoiceWriteService
from app.types import TemplateContext
from app.views.mixins.action_forms import ActionFormView


class _InvoiceFormView(ActionFormView):
    template = "invoices/form.html"

    def __init__(self) -> None:
        self.list_service = InvoiceListService()
        self.write_service = InvoiceWriteService()

    def extra_context(self, **kwargs: Any) -> TemplateContext:
        invoice_id = kwargs.get("invoice_id")
        return {
            "invoice_id": invoice_id,
            "form_mode": "edit" if invoice_id else "create",
            "customers": self.list_service.customer_options(),
        }


class InvoiceCreateFormView(_InvoiceFormView):
    """创建发票."""

    success_message = FormMessages.INVOICE_CREATED

    def submit(self, payload: object, **kwargs: Any) -> ActionResult:
        return self.write_service.create(payload)


class InvoiceEditFormView(_InvoiceFormView):
    """编辑发票, GET 时发票不存在返回 404."""

    success_message = FormMessages.INVOICE_UPDATED

    def initial_data(self, **kwargs: Any) -> dict[str, str]:
        return self.list_service.get_form_data(str(kwargs["invoice_id"]))

    def submit(self, payload: object, **kwargs: Any) -> ActionResult:
        return self.write_service.update(str(kwargs["invoice_id"]), payload)
