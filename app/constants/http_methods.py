"""表单视图接受的 HTTP 方法."""

from typing import ClassVar


class HttpMethod:
    GET: ClassVar[str] = "GET"
    POST: ClassVar[str] = "POST"

    FORM_METHODS: ClassVar[list[str]] = [GET, POST]

    @classmethod
    def is_submit(cls, method: str) -> bool:
        """POST 视为表单提交, 其余方法只渲染页面."""
        return method.upper() == cls.POST
