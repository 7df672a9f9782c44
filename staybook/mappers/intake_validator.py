"""Local checks for a booking request draft and assembly of its wire payload.

No I/O. Everything here runs before any network call is made.
"""

import re
from datetime import date

from staybook.exceptions.custom import DUPLICATE_EMAIL_MESSAGE, TERMS_MESSAGE
from staybook.mappers.email import normalize_email
from staybook.schemas.intake import (
    BookingDates,
    BookingRequestDraft,
    BookingRequestPayload,
    DateRangeEntry,
)

MISSING_FIELD_MESSAGE = "Please fill this field"
RANGE_ORDER_MESSAGE = "End date must be after start date"
INVALID_DATE_MESSAGE = "Please enter a valid date"
GENERIC_SUBMISSION_MESSAGE = "Failed to submit booking request"

REQUIRED_FIELDS: tuple[str, ...] = (
    "requester_name",
    "company_name",
    "email",
    "phone",
    "password",
    "password_confirmation",
    "city",
    "postcode",
    "team_size",
)

# Matched against backend error text; kept verbatim for compatibility.
DUPLICATE_EMAIL_PATTERNS: tuple[str, ...] = (
    "This email is already in use",
    "duplicate",
    "email",
    "unique constraint",
    "already exists",
)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def start_key(entry_id: str) -> str:
    return f"startDate-{entry_id}"


def end_key(entry_id: str) -> str:
    return f"endDate-{entry_id}"


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def validate_required_fields(draft: BookingRequestDraft) -> dict[str, str]:
    """Return an error for every required field left empty.

    Date ranges are satisfied globally: one complete row is enough. When no
    row is complete, every missing start/end cell is flagged individually.
    """
    errors: dict[str, str] = {}

    for field in REQUIRED_FIELDS:
        if _is_blank(getattr(draft, field)):
            errors[field] = MISSING_FIELD_MESSAGE

    if not any(entry.is_complete for entry in draft.booking_date_ranges):
        for entry in draft.booking_date_ranges:
            if _is_blank(entry.start_date):
                errors[start_key(entry.id)] = MISSING_FIELD_MESSAGE
            if _is_blank(entry.end_date):
                errors[end_key(entry.id)] = MISSING_FIELD_MESSAGE

    return errors


def validate_terms(draft: BookingRequestDraft) -> str | None:
    return None if draft.terms_accepted else TERMS_MESSAGE


def _parse_day(value: str) -> date | None:
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def validate_date_ranges(draft: BookingRequestDraft) -> dict[str, str]:
    """Every complete range must end after it starts."""
    errors: dict[str, str] = {}
    for entry in complete_date_ranges(draft):
        start, end = _parse_day(entry.start_date), _parse_day(entry.end_date)
        if start is None:
            errors[start_key(entry.id)] = INVALID_DATE_MESSAGE
        if end is None:
            errors[end_key(entry.id)] = INVALID_DATE_MESSAGE
        if start is not None and end is not None and start >= end:
            errors[end_key(entry.id)] = RANGE_ORDER_MESSAGE
    return errors


def passwords_match(draft: BookingRequestDraft) -> bool:
    return draft.password == draft.password_confirmation


def complete_date_ranges(draft: BookingRequestDraft) -> list[DateRangeEntry]:
    return [entry for entry in draft.booking_date_ranges if entry.is_complete]


def parse_team_size(value: str | None) -> int | None:
    """Parse the leading integer of ``value`` ("12 people" -> 12)."""
    if not value:
        return None
    match = _LEADING_INT_RE.match(value)
    if not match:
        return None
    return int(match.group(1))


def build_payload(draft: BookingRequestDraft) -> BookingRequestPayload:
    bookings = [
        BookingDates(start_date=entry.start_date, end_date=entry.end_date)
        for entry in complete_date_ranges(draft)
    ]
    return BookingRequestPayload(
        full_name=draft.requester_name,
        company_name=draft.company_name,
        email=normalize_email(draft.email),
        phone=draft.phone,
        project_postcode=draft.postcode,
        password=draft.password,
        bookings=bookings,
        team_size=parse_team_size(draft.team_size),
        budget_per_person=draft.budget_per_night,
        city=draft.city,
        terms_accepted=draft.terms_accepted,
    )


def is_duplicate_email_message(message: str | None) -> bool:
    if not message:
        return False
    return any(pattern in message for pattern in DUPLICATE_EMAIL_PATTERNS)


def classify_submission_error(message: str | None) -> str:
    """Map a backend rejection to the message shown next to the email field."""
    message = message or GENERIC_SUBMISSION_MESSAGE
    if is_duplicate_email_message(message):
        return DUPLICATE_EMAIL_MESSAGE
    return message

