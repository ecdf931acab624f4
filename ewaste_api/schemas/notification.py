from datetime import datetime

from pydantic import BaseModel


class NotificationRead(BaseModel):
    id: int
    disposal_id: int
    message: str
    created_at: datetime

    class Config:
        from_attributes = True
