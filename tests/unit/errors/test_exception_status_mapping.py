import pytest
from werkzeug.exceptions import NotFound

from app.constants import AuthErrorType, ErrorMessages
from app.errors import AppError, AuthError, NotFoundError, map_exception_to_status


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (AuthError(), 401),
        (NotFoundError("Invoice not found."), 404),
        (AppError(), 500),
        (NotFound(), 404),
        (RuntimeError("boom"), 500),
    ],
)
def test_map_exception_to_status(error: BaseException, expected: int) -> None:
    assert map_exception_to_status(error) == expected


@pytest.mark.unit
def test_auth_error_carries_type_tag() -> None:
    default = AuthError()
    provider = AuthError(AuthErrorType.INVALID_PROVIDER)

    assert default.type == "CredentialsSignin"
    assert provider.type == "InvalidProvider"
    assert default.message_key == "INVALID_CREDENTIALS"


@pytest.mark.unit
def test_app_error_resolves_message_from_key() -> None:
    assert NotFoundError().message == ErrorMessages.RESOURCE_NOT_FOUND
    assert AppError().message == ErrorMessages.INTERNAL_ERROR
    assert NotFoundError("Invoice not found.").message == "Invoice not found."
