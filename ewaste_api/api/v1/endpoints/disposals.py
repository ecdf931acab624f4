from typing import Any, List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlmodel import Session

from ewaste_api.core.config import settings
from ewaste_api.db.session import get_session
from ewaste_api.schemas.listing import ListingCreatedResponse, ListingRead
from ewaste_api.services.error_handler import EwasteError
from ewaste_api.services.listing_service import ListingService
from ewaste_api.services.upload_service import UploadStorage

router = APIRouter()


def get_listing_service(db: Session = Depends(get_session)) -> ListingService:
    return ListingService(db)


def get_upload_storage() -> UploadStorage:
    return UploadStorage(settings.upload_dir, settings.upload_url_prefix)


@router.post("/dispose", response_model=ListingCreatedResponse, status_code=201)
def create_disposal(
    *,
    item_name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    contact: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    service: ListingService = Depends(get_listing_service),
    storage: UploadStorage = Depends(get_upload_storage),
) -> Any:
    """
    Post an e-waste item for disposal, with an optional image.
    """
    # Fields are checked before the image is written to disk
    service.validate_fields(item_name, description, contact)
    image_url = storage.save(image)
    try:
        listing = service.create_listing(
            item_name=item_name,
            description=description,
            contact=contact,
            image_url=image_url,
        )
    except EwasteError:
        storage.delete(image_url)
        raise
    return {"message": "E-waste uploaded successfully", "data": listing}


@router.get("/disposals", response_model=List[ListingRead])
def read_disposals(
    service: ListingService = Depends(get_listing_service),
) -> Any:
    """
    All listings, newest first.
    """
    return service.list_listings()
