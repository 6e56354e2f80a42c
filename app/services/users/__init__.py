"""用户相关服务."""

from app.services.users.signup_service import SignupService

__all__ = ["SignupService"]
