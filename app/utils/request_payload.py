"""表单 payload 规范化.

把 ``request.form`` (MultiDict) 或普通 mapping 统一成单值 dict, 交给 schema 校验.
这里只清理空白与 NUL 字符, 不做业务校验; 密码字段原样保留.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import cast

from werkzeug.datastructures import MultiDict

from app.types.structures import FormValues, ScalarValue

_STRING_LIKE_TYPES = (str, bytes, bytearray)


def parse_payload(payload: object | None) -> FormValues:
    """解析并规范化表单 payload.

    同名多值时取最后一个值, 与浏览器表单的覆盖语义一致.

    Raises:
        TypeError: payload 既不是 mapping 也不是 MultiDict.

    """
    if payload is None:
        return {}
    if isinstance(payload, MultiDict):
        return {key: _clean(key, values[-1] if values else None) for key, values in payload.lists()}
    if isinstance(payload, Mapping):
        return {key: _clean(key, _last(value)) for key, value in payload.items()}
    raise TypeError("payload 必须为 mapping 或 MultiDict")


def _last(value: object) -> object:
    if isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES):
        return value[-1] if value else None
    return value


def _clean(field_name: str, value: object) -> ScalarValue:
    if value is None or isinstance(value, (bool, int, float)):
        return cast(ScalarValue, value)
    text = value.decode(errors="ignore") if isinstance(value, (bytes, bytearray)) else str(value)
    if "password" in field_name.lower():
        return text
    return text.replace("\x00", "").strip()
