"""通用表单提交视图.

集成 GET/POST 逻辑: GET 渲染表单, POST 调用 service 并把 ActionResult 转换为响应.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from flask import flash, redirect, render_template, request
from flask.views import MethodView

from app.constants import FlashCategory

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from app.services.common.action_result import ActionResult
    from app.types import FieldErrors, TemplateContext

_SENSITIVE_FIELD_MARKERS = ("password", "csrf_token")


class ActionFormView(MethodView):
    """通用 GET/POST 视图, 子类只需设置 template 并实现 submit.

    ActionResult 到响应的转换:
    - redirect: flash 成功提示(若配置)并跳转
    - rejected: 重新渲染表单, 携带按字段错误与汇总提示
    - failed: 重新渲染表单, 只携带通用提示

    Attributes:
        template: 表单模板路径.
        success_message: 成功后的 flash 文案, 为空时不提示.

    """

    template: ClassVar[str]
    success_message: ClassVar[str | None] = None

    def get(self, **kwargs: Any) -> ResponseReturnValue:
        """GET 请求处理,显示表单."""
        context = self._build_context(form_data=self.initial_data(**kwargs), **kwargs)
        return render_template(self.template, **context)

    def post(self, **kwargs: Any) -> ResponseReturnValue:
        """POST 请求处理,提交表单."""
        result = self.submit(request.form, **kwargs)
        if result.is_redirect and result.location:
            if self.success_message:
                flash(self.success_message, FlashCategory.SUCCESS)
            return redirect(result.location)

        context = self._build_context(
            form_data=self._echo_form_data(),
            errors=result.field_errors,
            message=result.message,
            **kwargs,
        )
        return render_template(self.template, **context)

    # ------------------------------------------------------------------ #
    # Hooks
    # ------------------------------------------------------------------ #
    def submit(self, payload: object, **kwargs: Any) -> ActionResult:
        raise NotImplementedError

    def initial_data(self, **kwargs: Any) -> dict[str, str]:
        _ = kwargs
        return {}

    def extra_context(self, **kwargs: Any) -> TemplateContext:
        _ = kwargs
        return {}

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def _echo_form_data() -> dict[str, str]:
        """回显用的表单数据, 不回显密码等敏感字段."""
        return {
            key: value
            for key, value in request.form.items()
            if not any(marker in key.lower() for marker in _SENSITIVE_FIELD_MARKERS)
        }

    def _build_context(
        self,
        *,
        form_data: dict[str, str],
        errors: FieldErrors | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> TemplateContext:
        context: TemplateContext = {
            "form_data": form_data,
            "form_errors": errors or {},
            "form_message": message,
        }
        context.update(self.extra_context(**kwargs))
        return context
