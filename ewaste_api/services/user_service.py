import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from ewaste_api.core.security import get_password_hash, verify_password
from ewaste_api.models.user import User
from ewaste_api.services.error_handler import (
    AuthError,
    ConstraintViolation,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class UserService:
    """Registration and credential checks."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, name: str, email: str, password: str) -> User:
        if not name or not email or not password:
            raise ValidationError("All fields are required")

        user = User(name=name, email=email, password_hash=get_password_hash(password))
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Registration rejected for {email}: {e.orig}")
            raise ConstraintViolation("Database error (email may already exist)") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to register {email}: {e}")
            raise StoreError("Database error") from e
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user for valid credentials, else raise AuthError."""
        if not email or not password:
            raise ValidationError("All fields are required")

        user = self.db.exec(select(User).where(User.email == email)).first()
        if user is None or not verify_password(password, user.password_hash):
            raise AuthError()
        return user
