"""用户注册 Service.

职责:
- 校验注册表单
- 使用 bcrypt 生成密码哈希, 只落库哈希值
- 调用 repository 执行单条 insert 并提交
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from app import bcrypt
from app.constants import FormMessages, RoutePaths
from app.constants.validation_limits import BCRYPT_LOG_ROUNDS_DEFAULT
from app.repositories.users_repository import UsersRepository
from app.schemas.users import SignupPayload
from app.schemas.validation import validate_form
from app.services.common.action_result import ActionResult
from app.utils.structlog_config import log_error, log_info


def hash_password(password: str, *, rounds: int = BCRYPT_LOG_ROUNDS_DEFAULT) -> str:
    """生成 bcrypt 密码哈希."""
    return bcrypt.generate_password_hash(password, rounds=rounds).decode("utf-8")


class SignupService:
    """注册编排服务."""

    def __init__(self, repository: UsersRepository | None = None, *, rounds: int = BCRYPT_LOG_ROUNDS_DEFAULT) -> None:
        """初始化服务并注入用户仓库与哈希成本."""
        self._repository = repository or UsersRepository()
        self._rounds = rounds

    def signup(self, payload: object) -> ActionResult:
        """注册新用户, 成功后跳转到登录页."""
        validation = validate_form(SignupPayload, payload, message=FormMessages.CREATE_USER_MISSING_FIELDS)
        if validation.data is None:
            return ActionResult.from_validation(validation)

        fields = validation.data
        password_hash = hash_password(fields.password, rounds=self._rounds)
        try:
            self._repository.insert(name=fields.name, email=fields.email, password_hash=password_hash)
            self._repository.commit()
        except SQLAlchemyError as exc:
            self._repository.rollback()
            log_error("注册用户失败", module="users", exception=exc, email=fields.email)
            return ActionResult.failed(FormMessages.CREATE_USER_DATABASE_ERROR)

        log_info("注册用户成功", module="users", email=fields.email)
        return ActionResult.redirect(RoutePaths.LOGIN)
