from fastapi import APIRouter, Depends, Request
from sqlmodel import Session
from slowapi import Limiter
from slowapi.util import get_remote_address

from ewaste_api.core.config import settings
from ewaste_api.db.session import get_session
from ewaste_api.schemas.user import (
    LoginResponseSchema,
    MessageSchema,
    UserLoginSchema,
    UserRegisterSchema,
    UserResponseSchema,
)
from ewaste_api.services.user_service import UserService

router = APIRouter()

# Rate limiter for auth endpoints
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def get_user_service(db: Session = Depends(get_session)) -> UserService:
    return UserService(db)


@router.post("/register", response_model=MessageSchema)
@limiter.limit(settings.auth_rate_limit)
def register_user(
    request: Request,
    user_data: UserRegisterSchema,
    service: UserService = Depends(get_user_service)
):
    """Register a new user."""
    service.register(user_data.name, user_data.email, user_data.password)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=LoginResponseSchema)
@limiter.limit(settings.auth_rate_limit)
def login(
    request: Request,
    credentials: UserLoginSchema,
    service: UserService = Depends(get_user_service)
):
    """Check credentials and return the user's public profile."""
    user = service.authenticate(credentials.email, credentials.password)
    return {
        "message": "Login successful",
        "user": UserResponseSchema.model_validate(user),
    }
