from typing import Optional
from sqlmodel import SQLModel, Field


class Listing(SQLModel, table=True):
    """An e-waste item posted for disposal. Creation order is the id."""
    __tablename__ = "disposal"

    id: Optional[int] = Field(default=None, primary_key=True)
    image_url: Optional[str] = Field(default=None, max_length=500)
    item_name: str = Field(max_length=255)
    description: str
    contact: str = Field(max_length=255)
