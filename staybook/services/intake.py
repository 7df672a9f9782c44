import logging

from staybook.exceptions.custom import (
    BookingApiError,
    DuplicateEmailError,
    FieldValidationError,
    PasswordMismatchError,
    PasswordPolicyError,
    SubmissionRejectedError,
    TermsNotAcceptedError,
)
from staybook.mappers.email import normalize_email
from staybook.mappers.intake_validator import (
    build_payload,
    classify_submission_error,
    is_duplicate_email_message,
    passwords_match,
    validate_date_ranges,
    validate_required_fields,
    validate_terms,
)
from staybook.mappers.password_policy import (
    password_policy_message,
    validate_password_policy,
)
from staybook.schemas.identity import EmailCheck
from staybook.schemas.intake import BookingRequestDraft, SubmissionResult
from staybook.schemas.responses import ValidationReport
from staybook.services.booking_api import BookingApiService
from staybook.services.identity_lookup import IdentityLookupService

logger = logging.getLogger(__name__)


def check_locally(draft: BookingRequestDraft) -> ValidationReport:
    """Every check that needs no network, collected into one report."""
    errors = validate_required_fields(draft)
    if not errors:
        errors = validate_date_ranges(draft)
    terms_error = validate_terms(draft)
    unmet = validate_password_policy(draft.password)
    mismatch = not passwords_match(draft)
    return ValidationReport(
        valid=not (errors or terms_error or unmet or mismatch),
        field_errors=errors,
        terms_error=terms_error,
        password_requirements=unmet,
        password_mismatch=mismatch,
    )


class IntakeService:
    """Runs a booking request draft through the intake pipeline.

    Local checks run first; the identity tables are only consulted once the
    draft is complete, and the booking API only once the email is cleared.
    Every abort path raises an ``IntakeError`` subclass.
    """

    def __init__(self, lookup: IdentityLookupService, booking_api: BookingApiService):
        self._lookup = lookup
        self._booking_api = booking_api

    async def submit(self, draft: BookingRequestDraft) -> SubmissionResult:
        errors = validate_required_fields(draft)
        if not draft.terms_accepted:
            raise TermsNotAcceptedError(errors)
        if errors:
            raise FieldValidationError(errors)

        range_errors = validate_date_ranges(draft)
        if range_errors:
            raise FieldValidationError(range_errors)

        email = normalize_email(draft.email)
        check = await self._lookup.check_email_uniqueness(email)
        if check == EmailCheck.already_exists:
            raise DuplicateEmailError("exists")
        if check == EmailCheck.lookup_failed:
            raise DuplicateEmailError("lookup_failed")

        unmet = validate_password_policy(draft.password)
        if unmet:
            raise PasswordPolicyError(unmet, password_policy_message(unmet))

        if not passwords_match(draft):
            raise PasswordMismatchError()

        payload = build_payload(draft)
        try:
            result = await self._booking_api.submit(payload)
        except BookingApiError as exc:
            logger.warning(
                "Booking API rejected request (status=%s): %s",
                exc.status_code, exc.message,
            )
            if is_duplicate_email_message(exc.message):
                raise DuplicateEmailError("backend") from exc
            raise SubmissionRejectedError(
                classify_submission_error(exc.message), status_code=exc.status_code
            ) from exc

        logger.info("Booking request submitted for %s", email)
        return result
