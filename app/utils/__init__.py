"""发票看板的通用工具: 时间、缓存、结构化日志与表单 payload 规范化."""
