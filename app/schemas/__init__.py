"""Pydantic schemas.

集中维护表单写路径的 payload schema, 用于:
- 类型转换与默认值
- 业务字段校验(输出面向用户的错误文案)
- 表单字段名(camelCase)与属性名的 alias 映射
"""
