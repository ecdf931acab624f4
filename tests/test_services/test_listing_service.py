import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from ewaste_api.services.error_handler import ListingNotFound, StoreError, ValidationError
from ewaste_api.services.listing_service import ListingService


def test_create_listing(session: Session):
    service = ListingService(session)

    listing = service.create_listing("Old laptop", "No battery", "555-0100")

    assert listing.id is not None
    assert listing.image_url is None
    assert service.get_listing(listing.id).item_name == "Old laptop"


@pytest.mark.parametrize("item_name, description, contact", [
    ("", "No battery", "555-0100"),
    ("Old laptop", None, "555-0100"),
    ("Old laptop", "No battery", "   "),
])
def test_create_listing_requires_fields(session: Session, item_name, description, contact):
    with pytest.raises(ValidationError):
        ListingService(session).create_listing(item_name, description, contact)


def test_list_listings_newest_first(session: Session):
    service = ListingService(session)
    first = service.create_listing("Laptop", "No battery", "555-0100", image_url="/uploads/1-a.png")
    second = service.create_listing("Monitor", "Dead pixels", "555-0101")

    assert [item.id for item in service.list_listings()] == [second.id, first.id]


def test_get_listing_not_found(session: Session):
    with pytest.raises(ListingNotFound):
        ListingService(session).get_listing(42)


def test_create_listing_store_failure():
    """Store errors are rolled back and surfaced as StoreError."""
    mock_db = MagicMock(spec=Session)
    mock_db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))

    with pytest.raises(StoreError):
        ListingService(mock_db).create_listing("Laptop", "No battery", "555-0100")
    mock_db.rollback.assert_called_once()
