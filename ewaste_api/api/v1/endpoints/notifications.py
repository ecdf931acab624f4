from typing import Any, List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ewaste_api.db.session import get_session
from ewaste_api.schemas.notification import NotificationRead
from ewaste_api.services.notification_service import NotificationService

router = APIRouter()


def get_notification_service(db: Session = Depends(get_session)) -> NotificationService:
    return NotificationService(db)


@router.get("/notifications/{disposal_id}", response_model=List[NotificationRead])
def read_notifications(
    disposal_id: int,
    service: NotificationService = Depends(get_notification_service),
) -> Any:
    """
    Decision notifications for a listing, most recent first.
    """
    return service.list_for_listing(disposal_id)
