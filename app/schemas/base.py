"""Schema 基础设施."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PayloadSchema(BaseModel):
    """写路径 payload 的基础 schema.

    约定:
    - 默认忽略未知字段, 表单中的 csrf_token/redirectTo 等字段不参与校验.
    - 字段以表单字段名(camelCase)作为 alias, 代码内使用 snake_case 属性名.
    - schema 负责业务校验与错误文案, request payload adapter 负责基础规范化.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)
