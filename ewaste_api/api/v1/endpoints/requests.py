from typing import Any, List

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from ewaste_api.db.session import get_session
from ewaste_api.schemas.request import (
    RequestCreate,
    RequestCreatedResponse,
    RequestDecision,
    RequestRead,
)
from ewaste_api.schemas.user import MessageSchema
from ewaste_api.services.email_service import EmailDispatcher
from ewaste_api.services.request_service import RequestService

router = APIRouter()


def get_email_dispatcher(request: Request) -> EmailDispatcher:
    """The application's shared dispatcher, created in main."""
    return request.app.state.email_dispatcher


def get_request_service(
    db: Session = Depends(get_session),
    dispatcher: EmailDispatcher = Depends(get_email_dispatcher),
) -> RequestService:
    return RequestService(db, dispatcher)


@router.get("/requests", response_model=List[RequestRead])
def read_requests(
    service: RequestService = Depends(get_request_service),
) -> Any:
    """
    All requests, newest first.
    """
    return service.list_requests()


@router.post("/request", response_model=RequestCreatedResponse, status_code=201)
def submit_request(
    *,
    request_in: RequestCreate,
    service: RequestService = Depends(get_request_service),
) -> Any:
    """
    Request a listed item. The request starts out Pending.
    """
    created = service.submit_request(
        disposal_id=request_in.disposal_id,
        receiver_name=request_in.receiver_name,
        receiver_contact=request_in.receiver_contact,
        receiver_email=request_in.receiver_email,
    )
    return {"message": "Request submitted successfully", "data": created}


@router.get("/requests/{disposal_id}", response_model=List[RequestRead])
def read_requests_for_listing(
    disposal_id: int,
    service: RequestService = Depends(get_request_service),
) -> Any:
    """
    Requests for one listing, newest first.
    """
    return service.list_requests_for_listing(disposal_id)


@router.put("/request/{request_id}", response_model=MessageSchema)
def decide_request(
    request_id: int,
    decision: RequestDecision,
    service: RequestService = Depends(get_request_service),
) -> Any:
    """
    Approve or reject a Pending request. The receiver gets a notification
    on the listing and, best effort, an email.
    """
    updated = service.decide_request(request_id, decision.status)
    return {"message": f"Request {updated.status.value} successfully!"}
