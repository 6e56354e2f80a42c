"""表单提交流程的结果类型.

提交结果只有三种形态:
- redirect: 写入成功, 由路由层转换为 HTTP 跳转
- rejected: 校验失败, 携带按字段的错误与汇总提示
- failed: 持久化或认证失败, 只携带通用提示
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from app.schemas.validation import FormValidationResult
    from app.types import FieldErrors

ActionKind = Literal["redirect", "rejected", "failed"]


@dataclass(frozen=True, slots=True)
class ActionResult:
    """一次表单提交的结果."""

    kind: ActionKind
    location: str | None = None
    message: str | None = None
    field_errors: FieldErrors = field(default_factory=dict)

    @classmethod
    def redirect(cls, location: str) -> ActionResult:
        return cls(kind="redirect", location=location)

    @classmethod
    def rejected(cls, field_errors: FieldErrors, message: str) -> ActionResult:
        return cls(kind="rejected", message=message, field_errors=dict(field_errors))

    @classmethod
    def failed(cls, message: str) -> ActionResult:
        return cls(kind="failed", message=message)

    @classmethod
    def from_validation(cls, result: FormValidationResult) -> ActionResult:
        """把校验失败结果转换为 rejected."""
        return cls.rejected(result.field_errors, result.message or "")

    @property
    def is_redirect(self) -> bool:
        return self.kind == "redirect"

    @property
    def is_rejected(self) -> bool:
        return self.kind == "rejected"

    @property
    def is_failed(self) -> bool:
        return self.kind == "failed"
