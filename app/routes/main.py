"""站点根路径: 一律转到发票列表."""

from http import HTTPStatus

from flask import Blueprint, redirect, url_for

from app.types import RouteReturn

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
@main_bp.route("/dashboard")
def index() -> RouteReturn:
    return redirect(url_for("invoices.index"))


@main_bp.route("/favicon.ico")
def favicon() -> RouteReturn:
    """没有图标文件, 返回 204 以免日志里出现 404."""
    return "", HTTPStatus.NO_CONTENT
