"""认证相关服务."""

from app.services.auth.login_service import LoginService
from app.services.auth.sign_in import sign_in

__all__ = ["LoginService", "sign_in"]
