"""服务层: 编排表单提交 (校验 -> 持久化 -> 缓存失效 -> 跳转).

子包: invoices 发票增删改与列表, users 注册, auth 登录, cache 视图缓存, common 提交结果.
"""
