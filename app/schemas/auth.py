"""认证相关 schema."""

from __future__ import annotations

from typing import Any

from pydantic import EmailStr, Field, ValidatorFunctionWrapHandler, field_validator

from app.schemas.base import PayloadSchema
from app.schemas.users import validate_email_field, validate_password_length


class CredentialsPayload(PayloadSchema):
    """邮箱 + 密码登录 payload."""

    email: EmailStr = Field(default=None, validate_default=True)  # type: ignore[assignment]
    password: str = Field(default=None, validate_default=True)  # type: ignore[assignment]

    @field_validator("email", mode="wrap")
    @classmethod
    def _validate_email(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return validate_email_field(value, handler)

    @field_validator("password", mode="before")
    @classmethod
    def _validate_password(cls, value: Any) -> str:
        return validate_password_length(value)
