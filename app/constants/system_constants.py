"""发票看板 - 常量定义模块

统一管理面向用户的固定文案与认证失败类型.
"""


class ErrorMessages:
    """错误消息常量."""

    INTERNAL_ERROR = "Something went wrong."
    RESOURCE_NOT_FOUND = "Resource not found."
    AUTHENTICATION_REQUIRED = "Please log in to access this page."
    INVALID_CREDENTIALS = "Invalid credentials."
    AUTH_FAILED = "Something went wrong."


class FormMessages:
    """表单提交流程的固定文案.

    校验失败的汇总提示与持久化失败的通用提示均为固定文本,
    不携带任何底层异常细节.
    """

    CREATE_INVOICE_MISSING_FIELDS = "Missing Fields. Failed to Create Invoice."
    UPDATE_INVOICE_MISSING_FIELDS = "Missing Fields. Failed to Update Invoice."
    CREATE_USER_MISSING_FIELDS = "Missing Fields. Failed to Create User."

    CREATE_INVOICE_DATABASE_ERROR = "Database Error: Failed to Create Invoice."
    UPDATE_INVOICE_DATABASE_ERROR = "Database Error: Failed to Update Invoice."
    DELETE_INVOICE_DATABASE_ERROR = "Database Error: Failed to Delete Invoice."
    CREATE_USER_DATABASE_ERROR = "Database Error: Failed to Create User."

    INVOICE_CREATED = "Invoice created."
    INVOICE_UPDATED = "Invoice updated."
    INVOICE_DELETED = "Invoice deleted."
    ACCOUNT_CREATED = "Account created. Please log in."
    LOGGED_OUT = "You have been logged out."


class AuthErrorType:
    """认证失败类型标签."""

    CREDENTIALS_SIGNIN = "CredentialsSignin"
    INVALID_PROVIDER = "InvalidProvider"


__all__ = [
    "AuthErrorType",
    "ErrorMessages",
    "FormMessages",
]
