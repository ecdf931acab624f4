from typing import List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select, desc

from ewaste_api.models.listing import Listing
from ewaste_api.services.error_handler import ListingNotFound, StoreError, ValidationError

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ListingService:
    """Service for creating and reading disposal listings."""

    def __init__(self, db: Session):
        self.db = db

    def validate_fields(self, item_name, description, contact) -> None:
        if any(_is_blank(v) for v in (item_name, description, contact)):
            raise ValidationError()

    def create_listing(
        self,
        item_name: str,
        description: str,
        contact: str,
        image_url: Optional[str] = None,
    ) -> Listing:
        """Insert a new listing and return it with its assigned id."""
        self.validate_fields(item_name, description, contact)

        listing = Listing(
            item_name=item_name,
            description=description,
            contact=contact,
            image_url=image_url,
        )
        try:
            self.db.add(listing)
            self.db.commit()
            self.db.refresh(listing)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create listing '{item_name}': {e}")
            raise StoreError() from e

        logger.info(f"Listing {listing.id} created: {item_name}")
        return listing

    def list_listings(self) -> List[Listing]:
        """All listings, newest first."""
        statement = select(Listing).order_by(desc(Listing.id))
        return list(self.db.exec(statement).all())

    def get_listing(self, listing_id: int) -> Listing:
        listing = self.db.get(Listing, listing_id)
        if listing is None:
            raise ListingNotFound()
        return listing
