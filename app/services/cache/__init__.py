"""缓存相关服务."""
