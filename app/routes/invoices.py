"""发票看板 - 发票路由."""

from collections.abc import Callable
from typing import cast

from flask import Blueprint, current_app, flash, redirect, render_template, request
from flask.typing import ResponseReturnValue
from flask_login import login_required

from app.constants import FlashCategory, FormMessages, HttpMethod, RoutePaths
from app.constants.validation_limits import INVOICES_PER_PAGE_DEFAULT
from app.services.invoices.invoice_list_service import InvoiceListService
from app.services.invoices.invoice_write_service import InvoiceWriteService
from app.types import RouteReturn
from app.types.invoices import InvoiceListFilters
from app.views.invoice_forms import InvoiceCreateFormView, InvoiceEditFormView

# 创建蓝图
invoices_bp = Blueprint("invoices", __name__)


@invoices_bp.before_request
@login_required
def require_login() -> None:
    """发票相关页面均需登录."""


def _resolve_page() -> int:
    page = request.args.get("page", 1, type=int) or 1
    return max(page, 1)


@invoices_bp.route("")
def index() -> RouteReturn:
    """发票列表.

    Query Parameters:
        query: 搜索关键词,可选.
        page: 页码,默认 1.

    """
    search = request.args.get("query", "", type=str).strip()
    filters = InvoiceListFilters(
        page=_resolve_page(),
        limit=int(current_app.config.get("INVOICES_PER_PAGE", INVOICES_PER_PAGE_DEFAULT)),
        search=search,
    )
    result = InvoiceListService().list_invoices(filters)
    return render_template("invoices/list.html", result=result, query=search)


_create_view = cast(Callable[..., ResponseReturnValue], InvoiceCreateFormView.as_view("create"))
_edit_view = cast(Callable[..., ResponseReturnValue], InvoiceEditFormView.as_view("edit"))

invoices_bp.add_url_rule("/create", view_func=_create_view, methods=HttpMethod.FORM_METHODS, endpoint="create")
invoices_bp.add_url_rule(
    "/<string:invoice_id>/edit",
    view_func=_edit_view,
    methods=HttpMethod.FORM_METHODS,
    endpoint="edit",
)


@invoices_bp.route("/<string:invoice_id>/delete", methods=[HttpMethod.POST])
def delete(invoice_id: str) -> RouteReturn:
    """删除发票, 记录不存在时同样跳回列表."""
    result = InvoiceWriteService().delete(invoice_id)
    if result.is_redirect and result.location:
        flash(FormMessages.INVOICE_DELETED, FlashCategory.SUCCESS)
        return redirect(result.location)
    flash(result.message or FormMessages.DELETE_INVOICE_DATABASE_ERROR, FlashCategory.ERROR)
    return redirect(RoutePaths.INVOICES)
