"""Edits applied to a draft as the user works through the request form.

Each function returns a new draft; the caller's copy is never mutated.
"""

from staybook.exceptions.custom import LastDateRangeError
from staybook.mappers.intake_validator import end_key, start_key
from staybook.schemas.intake import BookingRequestDraft, DateRangeEntry


def new_draft() -> BookingRequestDraft:
    return BookingRequestDraft()


def update_field(draft: BookingRequestDraft, name: str, value) -> BookingRequestDraft:
    if name not in BookingRequestDraft.model_fields or name == "booking_date_ranges":
        raise KeyError(name)
    return draft.model_validate({**draft.model_dump(), name: value})


def add_date_range(draft: BookingRequestDraft) -> tuple[BookingRequestDraft, DateRangeEntry]:
    entry = DateRangeEntry()
    ranges = [*draft.booking_date_ranges, entry]
    return draft.model_copy(update={"booking_date_ranges": ranges}), entry


def remove_date_range(draft: BookingRequestDraft, entry_id: str) -> BookingRequestDraft:
    if len(draft.booking_date_ranges) <= 1:
        raise LastDateRangeError(entry_id)
    ranges = [e for e in draft.booking_date_ranges if e.id != entry_id]
    if len(ranges) == len(draft.booking_date_ranges):
        raise KeyError(entry_id)
    return draft.model_copy(update={"booking_date_ranges": ranges})


def update_date_range(
    draft: BookingRequestDraft,
    entry_id: str,
    *,
    start_date: str | None = None,
    end_date: str | None = None,
) -> BookingRequestDraft:
    ranges: list[DateRangeEntry] = []
    found = False
    for entry in draft.booking_date_ranges:
        if entry.id == entry_id:
            found = True
            changes = {}
            if start_date is not None:
                changes["start_date"] = start_date
            if end_date is not None:
                changes["end_date"] = end_date
            entry = entry.model_copy(update=changes)
        ranges.append(entry)
    if not found:
        raise KeyError(entry_id)
    return draft.model_copy(update={"booking_date_ranges": ranges})


def clear_field_error(errors: dict[str, str], *keys: str) -> dict[str, str]:
    return {k: v for k, v in errors.items() if k not in keys}


def date_range_error_keys(entry_id: str, *, start: bool, end: bool) -> list[str]:
    keys = []
    if start:
        keys.append(start_key(entry_id))
    if end:
        keys.append(end_key(entry_id))
    return keys
