from pydantic import BaseModel, EmailStr, Field


class UserRegisterSchema(BaseModel):
    """Schema for user registration requests."""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)


class UserLoginSchema(BaseModel):
    """Schema for user login requests."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponseSchema(BaseModel):
    """Public view of a user (no password hash)."""
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class MessageSchema(BaseModel):
    message: str


class LoginResponseSchema(BaseModel):
    message: str
    user: UserResponseSchema
