"""用户注册 schema."""

from __future__ import annotations

from typing import Any

from pydantic import EmailStr, Field, ValidatorFunctionWrapHandler, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.constants.validation_limits import USER_NAME_MIN_LENGTH, USER_PASSWORD_MIN_LENGTH
from app.schemas.base import PayloadSchema


def validate_email_field(value: Any, handler: ValidatorFunctionWrapHandler) -> str:
    """邮箱字段的统一校验, 把 email-validator 的细节错误收敛为固定文案."""
    if value is None:
        raise ValueError("Email is required")
    try:
        return handler(value)
    except PydanticValidationError:
        raise ValueError("Invalid email address") from None


def validate_password_length(value: Any) -> str:
    if not isinstance(value, str) or len(value) < USER_PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {USER_PASSWORD_MIN_LENGTH} characters")
    return value


class SignupPayload(PayloadSchema):
    """注册用户 payload."""

    name: str = Field(default=None, validate_default=True)  # type: ignore[assignment]
    email: EmailStr = Field(default=None, validate_default=True)  # type: ignore[assignment]
    password: str = Field(default=None, validate_default=True)  # type: ignore[assignment]

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("Name is required")
        if len(value) < USER_NAME_MIN_LENGTH:
            raise ValueError(f"Minimum {USER_NAME_MIN_LENGTH} Characters Required")
        return value

    @field_validator("email", mode="wrap")
    @classmethod
    def _validate_email(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return validate_email_field(value, handler)

    @field_validator("password", mode="before")
    @classmethod
    def _validate_password(cls, value: Any) -> str:
        return validate_password_length(value)
