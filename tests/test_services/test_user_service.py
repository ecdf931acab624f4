import pytest
from sqlmodel import Session

from ewaste_api.models.user import User
from ewaste_api.services.error_handler import AuthError, ConstraintViolation, ValidationError
from ewaste_api.services.user_service import UserService


def test_register_hashes_password(session: Session):
    user = UserService(session).register("Ana", "ana@example.com", "hunter22")

    assert user.id is not None
    assert user.password_hash != "hunter22"
    assert user.password_hash.startswith("$2")


def test_register_duplicate_email(session: Session, test_user: User):
    with pytest.raises(ConstraintViolation):
        UserService(session).register("Other", test_user.email, "password123")


def test_register_missing_field(session: Session):
    with pytest.raises(ValidationError):
        UserService(session).register("Ana", "", "password123")


def test_authenticate(session: Session, test_user: User):
    service = UserService(session)

    assert service.authenticate(test_user.email, "testpassword").id == test_user.id
    with pytest.raises(AuthError):
        service.authenticate(test_user.email, "nope")
    with pytest.raises(AuthError):
        service.authenticate("missing@example.com", "testpassword")
