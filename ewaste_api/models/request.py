import enum
from typing import Optional

from sqlalchemy import Column, Enum
from sqlmodel import Field, SQLModel


class RequestStatus(str, enum.Enum):
    """Lifecycle states of a disposal request."""
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


# Targets an approver may move a Pending request to
DECISION_STATUSES = frozenset({RequestStatus.APPROVED, RequestStatus.REJECTED})


class DisposalRequest(SQLModel, table=True):
    """A receiver's claim on a listing."""
    __tablename__ = "requests"

    id: Optional[int] = Field(default=None, primary_key=True)
    disposal_id: int = Field(foreign_key="disposal.id", index=True)
    receiver_name: str = Field(max_length=255)
    receiver_contact: str = Field(max_length=255)
    receiver_email: str = Field(max_length=255)
    status: RequestStatus = Field(
        default=RequestStatus.PENDING,
        sa_column=Column(
            Enum(
                RequestStatus,
                name="request_status",
                values_callable=lambda statuses: [s.value for s in statuses],
                create_constraint=True,
                validate_strings=True,
            ),
            nullable=False,
            default=RequestStatus.PENDING,
        ),
    )
