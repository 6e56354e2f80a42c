import importlib

import pytest

from app import bcrypt
from app.constants import AuthErrorType
from app.core.exceptions import AuthError
from app.models.user import User
from app.repositories.users_repository import UsersRepository
from app.services.auth.sign_in import CredentialsProvider, sign_in

sign_in_module = importlib.import_module("app.services.auth.sign_in")


class _StubUsersRepository(UsersRepository):
    def __init__(self, user: User | None) -> None:
        self._user = user

    def get_by_email(self, email: str) -> User | None:
        if self._user is not None and self._user.email == email:
            return self._user
        return None


def _user() -> User:
    password_hash = bcrypt.generate_password_hash("secret1", rounds=4).decode("utf-8")
    return User(id="u-1", name="Ada", email="ada@example.com", password=password_hash)


@pytest.mark.unit
def test_credentials_provider_returns_user_on_match() -> None:
    user = _user()
    provider = CredentialsProvider(repository=_StubUsersRepository(user))

    assert provider.authorize({"email": "ada@example.com", "password": "secret1"}) is user


@pytest.mark.unit
@pytest.mark.parametrize(
    "credentials",
    [
        {"email": "ada@example.com", "password": "wrong-pass"},
        {"email": "nobody@example.com", "password": "secret1"},
        {"email": "not-an-email", "password": "secret1"},
        {"email": "ada@example.com", "password": "123"},
        {},
    ],
)
def test_credentials_provider_rejects_bad_credentials(credentials: dict[str, str]) -> None:
    provider = CredentialsProvider(repository=_StubUsersRepository(_user()))

    with pytest.raises(AuthError) as exc:
        provider.authorize(credentials)

    assert exc.value.type == AuthErrorType.CREDENTIALS_SIGNIN


@pytest.mark.unit
def test_unknown_provider_raises_invalid_provider() -> None:
    with pytest.raises(AuthError) as exc:
        sign_in("github", {}, providers={})

    assert exc.value.type == AuthErrorType.INVALID_PROVIDER


@pytest.mark.unit
def test_sign_in_logs_user_in(monkeypatch) -> None:
    user = _user()
    logged_in: list[tuple[User, bool]] = []
    monkeypatch.setattr(
        sign_in_module,
        "login_user",
        lambda target, remember=False: logged_in.append((target, remember)),
    )

    result = sign_in(
        "credentials",
        {"email": "ada@example.com", "password": "secret1"},
        providers={"credentials": CredentialsProvider(repository=_StubUsersRepository(user))},
    )

    assert result is user
    assert logged_in == [(user, False)]
