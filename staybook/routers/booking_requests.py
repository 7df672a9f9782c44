import logging

from fastapi import APIRouter

from staybook.dependencies import IdentityLookupDep, IntakeDep
from staybook.mappers.email import normalize_email
from staybook.schemas.intake import BookingRequestDraft
from staybook.schemas.responses import (
    EmailCheckRequest,
    EmailCheckResponse,
    SubmissionResponse,
    ValidationReport,
)
from staybook.services.intake import check_locally

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/booking-requests")

SUCCESS_MESSAGE = "Account created and booking request submitted successfully"


@router.post("", response_model=SubmissionResponse, status_code=201)
async def submit_booking_request(
    draft: BookingRequestDraft, service: IntakeDep
) -> SubmissionResponse:
    result = await service.submit(draft)
    return SubmissionResponse(
        success=True,
        message=result.message or SUCCESS_MESSAGE,
        booking_request_id=result.booking_request_id,
    )


@router.post("/validate", response_model=ValidationReport)
async def validate_booking_request(draft: BookingRequestDraft) -> ValidationReport:
    return check_locally(draft)


@router.post("/email-check", response_model=EmailCheckResponse)
async def check_email(
    request: EmailCheckRequest, lookup: IdentityLookupDep
) -> EmailCheckResponse:
    email = normalize_email(request.email)
    status = await lookup.check_email_uniqueness(email)
    return EmailCheckResponse(email=email, status=status)
