"""项目共享类型别名."""

from typing import Any

from flask.typing import ResponseReturnValue

from .structures import FieldErrors, FormValues, JsonValue, LoggerExtra, ScalarValue, StructlogEventDict

RouteReturn = ResponseReturnValue
TemplateContext = dict[str, Any]

__all__ = [
    "FieldErrors",
    "FormValues",
    "JsonValue",
    "LoggerExtra",
    "RouteReturn",
    "ScalarValue",
    "StructlogEventDict",
    "TemplateContext",
]
