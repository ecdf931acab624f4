from typing import Optional
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """Registered user. Only the auth routes touch this table."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str
