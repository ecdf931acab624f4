"""
Request Lifecycle Service

Receivers submit requests against a listing; an approver then moves each
request from Pending to Approved or Rejected exactly once. A decision
updates the status and appends a listing notification in one transaction,
and only after that transaction commits is the receiver emailed.
"""

from typing import List, Optional, Union
import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select, desc

from ewaste_api.models.listing import Listing
from ewaste_api.models.notification import Notification
from ewaste_api.models.request import DECISION_STATUSES, DisposalRequest, RequestStatus
from ewaste_api.services.email_service import EmailDispatcher, EmailMessage
from ewaste_api.services.error_handler import (
    ConstraintViolation,
    InvalidTransition,
    ListingNotFound,
    RequestNotFound,
    StoreError,
    ValidationError,
)
from ewaste_api.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


def decision_message(disposal_id: int, status: RequestStatus) -> str:
    return f"Your request for item ID {disposal_id} has been {status.value}."


def decision_email(request: DisposalRequest, status: RequestStatus) -> EmailMessage:
    return EmailMessage(
        to=request.receiver_email,
        subject=f"Your E-Waste Request has been {status.value}",
        body_text=(
            "Hello,\n\n"
            f"Your request for the e-waste item (ID: {request.disposal_id}) "
            f"has been {status.value}.\n\n"
            "Thank you for using our system!\n"
            "E-Waste Management Team"
        ),
    )


def parse_decision(target_status: Union[str, RequestStatus, None]) -> RequestStatus:
    """Map an approver's input to Approved or Rejected, else ValidationError."""
    try:
        status = RequestStatus(target_status)
    except ValueError:
        raise ValidationError("Invalid status!")
    if status not in DECISION_STATUSES:
        raise ValidationError("Invalid status!")
    return status


class RequestService:
    """Stateless coordinator for the request lifecycle."""

    def __init__(self, db: Session, dispatcher: Optional[EmailDispatcher] = None):
        self.db = db
        self.dispatcher = dispatcher
        self.notifications = NotificationService(db)

    def submit_request(
        self,
        disposal_id: int,
        receiver_name: str,
        receiver_contact: str,
        receiver_email: str,
    ) -> DisposalRequest:
        """Create a Pending request for an existing listing."""
        fields = (disposal_id, receiver_name, receiver_contact, receiver_email)
        if any(v is None or (isinstance(v, str) and not v.strip()) for v in fields):
            raise ValidationError()

        request = DisposalRequest(
            disposal_id=disposal_id,
            receiver_name=receiver_name,
            receiver_contact=receiver_contact,
            receiver_email=receiver_email,
            status=RequestStatus.PENDING,
        )
        try:
            self.db.add(request)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # The foreign key decides; only look the listing up to classify
            if self.db.get(Listing, disposal_id) is None:
                logger.info(f"Request rejected, listing {disposal_id} does not exist")
                raise ListingNotFound() from e
            logger.error(f"Constraint violation creating request for listing {disposal_id}: {e.orig}")
            raise ConstraintViolation() from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create request for listing {disposal_id}: {e}")
            raise StoreError() from e

        self.db.refresh(request)
        logger.info(f"Request {request.id} submitted for listing {disposal_id}")
        return request

    def decide_request(
        self,
        request_id: int,
        target_status: Union[str, RequestStatus],
    ) -> DisposalRequest:
        """
        Approve or reject a Pending request.

        The status change and the notification row commit together. The
        update only matches while the row is still Pending, so of two
        concurrent decisions on one request exactly one changes a row; the
        other gets InvalidTransition and writes nothing.

        Raises:
            ValidationError: target_status is not Approved or Rejected
            RequestNotFound: no request with this id
            InvalidTransition: the request was already decided
            StoreError: the transaction could not be committed
        """
        status = parse_decision(target_status)

        request = self.db.get(DisposalRequest, request_id)
        if request is None:
            raise RequestNotFound()

        statement = (
            update(DisposalRequest)
            .where(
                DisposalRequest.id == request_id,
                DisposalRequest.status == RequestStatus.PENDING,
            )
            .values(status=status)
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.exec(statement)
            if result.rowcount != 1:
                self.db.rollback()
                self.db.refresh(request)
                logger.warning(
                    f"Request {request_id} is already {request.status.value}, "
                    f"refusing to mark it {status.value}"
                )
                raise InvalidTransition(
                    f"Request has already been {request.status.value}"
                )

            self.notifications.append(
                request.disposal_id, decision_message(request.disposal_id, status)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to record decision for request {request_id}: {e}")
            raise StoreError() from e

        self.db.refresh(request)
        logger.info(f"Request {request_id} {status.value}")

        # Strictly after commit; the outcome is only logged
        if self.dispatcher is not None:
            try:
                self.dispatcher.dispatch(decision_email(request, status))
            except Exception as e:
                logger.error(f"Could not queue decision email for request {request_id}: {e}")

        return request

    def get_request(self, request_id: int) -> DisposalRequest:
        request = self.db.get(DisposalRequest, request_id)
        if request is None:
            raise RequestNotFound()
        return request

    def list_requests(self) -> List[DisposalRequest]:
        """All requests, newest first."""
        statement = select(DisposalRequest).order_by(desc(DisposalRequest.id))
        return list(self.db.exec(statement).all())

    def list_requests_for_listing(self, disposal_id: int) -> List[DisposalRequest]:
        """Requests for one listing, newest first."""
        statement = (
            select(DisposalRequest)
            .where(DisposalRequest.disposal_id == disposal_id)
            .order_by(desc(DisposalRequest.id))
        )
        return list(self.db.exec(statement).all())

    def list_notifications_for_listing(self, disposal_id: int) -> List[Notification]:
        return self.notifications.list_for_listing(disposal_id)
