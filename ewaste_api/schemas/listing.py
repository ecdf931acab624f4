from typing import Optional

from pydantic import BaseModel


class ListingRead(BaseModel):
    id: int
    image_url: Optional[str] = None
    item_name: str
    description: str
    contact: str

    class Config:
        from_attributes = True


class ListingCreatedResponse(BaseModel):
    message: str
    data: ListingRead
