"""表单与日志共用的数据形状."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TypeAlias

ScalarValue: TypeAlias = str | int | float | bool | None
# 规范化后的表单: 字段名 -> 最后一次提交的值
FormValues: TypeAlias = dict[str, ScalarValue]
# 字段名 -> 该字段的全部错误文案
FieldErrors: TypeAlias = dict[str, list[str]]

JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]
StructlogEventDict: TypeAlias = MutableMapping[str, JsonValue]
