"""应用工厂写入的运行期属性的类型标注."""

from __future__ import annotations

from datetime import timedelta

from flask import Flask
from flask_login import LoginManager

from app.settings import Settings


class InvoiceDashboardFlask(Flask):
    """`create_app` 会把已校验的 Settings 挂到 `app.settings`."""

    settings: Settings


class InvoiceDashboardLoginManager(LoginManager):
    login_view: str | None
    login_message: str
    login_message_category: str
    session_protection: str | None
    remember_cookie_duration: int | float | timedelta
    remember_cookie_httponly: bool


__all__ = ["InvoiceDashboardFlask", "InvoiceDashboardLoginManager"]
