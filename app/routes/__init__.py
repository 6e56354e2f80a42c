"""HTTP 路由: main (根路径跳转), auth (登录/注册/登出), invoices (发票列表与增删改)."""
