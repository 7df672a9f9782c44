import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    DuplicateEmailError,
    FieldValidationError,
    IntakeError,
    PasswordPolicyError,
    RecordsFetchError,
    SubmissionRejectedError,
    SubmissionTransportError,
    TermsNotAcceptedError,
)

logger = logging.getLogger(__name__)


async def intake_error_handler(_request: Request, exc: IntakeError) -> JSONResponse:
    content: dict = {"detail": exc.message, "error": type(exc).__name__}
    status_code = 422

    if isinstance(exc, (FieldValidationError, TermsNotAcceptedError)):
        content["field_errors"] = exc.errors
    elif isinstance(exc, PasswordPolicyError):
        content["password_requirements"] = exc.unmet
    elif isinstance(exc, DuplicateEmailError):
        status_code = 409
        logger.info("Booking request refused, email unusable (reason=%s)", exc.reason)
    elif isinstance(exc, SubmissionRejectedError):
        status_code = 400
        logger.warning("Booking request rejected: %s (status=%s)", exc.message, exc.status_code)
    elif isinstance(exc, SubmissionTransportError):
        status_code = 502
        logger.error("Booking API unreachable: %s", exc.detail)

    return JSONResponse(status_code=status_code, content=content)


async def records_fetch_error_handler(_request: Request, exc: RecordsFetchError) -> JSONResponse:
    logger.error("Records fetch error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Records backend error: {exc.message}"},
    )
