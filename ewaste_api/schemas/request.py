from pydantic import BaseModel, EmailStr, Field

from ewaste_api.models.request import RequestStatus


class RequestCreate(BaseModel):
    """A receiver's request for a listing."""
    disposal_id: int = Field(..., description="Id of the listing being requested.")
    receiver_name: str = Field(..., min_length=1, max_length=255)
    receiver_contact: str = Field(..., min_length=1, max_length=255)
    receiver_email: EmailStr


class RequestDecision(BaseModel):
    """Approver input. Checked against the allowed targets by the service."""
    status: str = Field(..., description="Either 'Approved' or 'Rejected'.")


class RequestRead(BaseModel):
    id: int
    disposal_id: int
    receiver_name: str
    receiver_contact: str
    receiver_email: str
    status: RequestStatus

    class Config:
        from_attributes = True


class RequestCreatedResponse(BaseModel):
    message: str
    data: RequestRead
