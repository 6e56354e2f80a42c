"""发票相关服务."""

from app.services.invoices.invoice_list_service import InvoiceListService
from app.services.invoices.invoice_write_service import InvoiceWriteService

__all__ = ["InvoiceListService", "InvoiceWriteService"]
