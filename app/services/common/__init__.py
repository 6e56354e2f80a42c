"""服务层通用类型."""

from .action_result import ActionResult

__all__ = ["ActionResult"]
