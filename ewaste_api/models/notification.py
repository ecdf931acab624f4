from typing import Optional
from sqlalchemy import Column, DateTime
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Notification(SQLModel, table=True):
    """Append-only record of a request decision, keyed to the listing."""
    __tablename__ = "notifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    disposal_id: int = Field(foreign_key="disposal.id", index=True)
    message: str = Field(max_length=500)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), index=True, nullable=False),
    )
