"""Schema 校验与错误映射.

``validate_form`` 供表单提交流程使用, 校验失败以结果值返回, 汇总全部字段错误.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from app.types.structures import FieldErrors
from app.utils.request_payload import parse_payload

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_LEVEL_ERROR_KEY = "__all__"
_DEFAULT_ERROR_MESSAGE = "参数校验失败"


@dataclass(frozen=True, slots=True)
class FormValidationResult(Generic[ModelT]):
    """表单校验结果.

    二选一: 成功时 ``data`` 为类型化的 payload; 失败时 ``field_errors`` 按字段列出
    全部错误(同一字段内保持校验顺序), ``message`` 为固定的汇总提示.
    """

    data: ModelT | None = None
    field_errors: FieldErrors = field(default_factory=dict)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.data is not None

    @classmethod
    def success(cls, data: ModelT) -> FormValidationResult[ModelT]:
        return cls(data=data)

    @classmethod
    def failure(cls, field_errors: FieldErrors, message: str) -> FormValidationResult[ModelT]:
        return cls(field_errors=field_errors, message=message)


def validate_form(
    model: type[ModelT],
    payload: object,
    *,
    message: str,
) -> FormValidationResult[ModelT]:
    """校验原始表单输入, 不抛出校验异常.

    Args:
        model: pydantic model, 字段以表单字段名为 alias.
        payload: ``request.form`` 或任意 mapping.
        message: 校验失败时的汇总提示.

    Returns:
        FormValidationResult: 成功携带 data, 失败携带 field_errors 与 message.

    """
    try:
        normalized = parse_payload(payload)
    except TypeError:
        return FormValidationResult.failure({FORM_LEVEL_ERROR_KEY: [_DEFAULT_ERROR_MESSAGE]}, message)

    try:
        data = model.model_validate(normalized)
    except PydanticValidationError as exc:
        return FormValidationResult.failure(_collect_field_errors(exc), message)
    return FormValidationResult.success(data)


def _collect_field_errors(exc: PydanticValidationError) -> FieldErrors:
    field_errors: FieldErrors = {}
    for error in exc.errors():
        field_name = _error_field(error) or FORM_LEVEL_ERROR_KEY
        field_errors.setdefault(field_name, []).append(_error_message(error))
    return field_errors


def _error_field(error: ErrorDetails) -> str | None:
    loc = error.get("loc")
    if isinstance(loc, tuple) and loc and isinstance(loc[0], str):
        return loc[0]
    return None


def _error_message(error: ErrorDetails) -> str:
    ctx = error.get("ctx")
    if isinstance(ctx, dict) and "error" in ctx:
        raw_error = ctx.get("error")
        if isinstance(raw_error, BaseException):
            return str(raw_error)

    msg = error.get("msg")
    if isinstance(msg, str) and msg.strip():
        return msg
    return _DEFAULT_ERROR_MESSAGE
