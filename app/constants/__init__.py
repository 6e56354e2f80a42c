"""面向用户的固定文案、发票状态、路由路径与 HTTP 相关常量."""

from http import HTTPStatus as HttpStatus

from .flash_categories import FlashCategory
from .http_methods import HttpMethod
from .routes import RoutePaths
from .status_types import InvoiceStatus
from .system_constants import AuthErrorType, ErrorMessages, FormMessages

__all__ = [
    "AuthErrorType",
    "ErrorMessages",
    "FlashCategory",
    "FormMessages",
    "HttpMethod",
    "HttpStatus",
    "InvoiceStatus",
    "RoutePaths",
]
