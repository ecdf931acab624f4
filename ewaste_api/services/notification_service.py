"""
Notification Service

Append-only log of request decisions, keyed to the listing.
"""

from typing import List
from sqlmodel import Session, select, desc
import logging

from ewaste_api.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for writing and reading listing notifications."""

    def __init__(self, db: Session):
        self.db = db

    def append(self, disposal_id: int, message: str) -> Notification:
        """
        Add a notification to the current transaction.

        The caller owns the transaction and is responsible for committing
        it together with whatever change the notification describes.
        """
        notification = Notification(disposal_id=disposal_id, message=message)
        self.db.add(notification)
        return notification

    def list_for_listing(self, disposal_id: int) -> List[Notification]:
        """Notifications for a listing, most recent first."""
        statement = (
            select(Notification)
            .where(Notification.disposal_id == disposal_id)
            .order_by(desc(Notification.created_at), desc(Notification.id))
        )
        return list(self.db.exec(statement).all())
