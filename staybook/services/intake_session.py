import logging

from staybook.exceptions.custom import (
    FieldValidationError,
    IntakeError,
    InvalidEmailError,
    PasswordMismatchError,
    PasswordPolicyError,
    TermsNotAcceptedError,
)
from staybook.mappers import draft_editor
from staybook.mappers.intake_validator import end_key, start_key
from staybook.schemas.intake import BookingRequestDraft, DateRangeEntry, SubmissionResult
from staybook.services.intake import IntakeService

logger = logging.getLogger(__name__)


class IntakeSession:
    """State of one booking request form, from mount to teardown.

    The presentation layer reads the error surfaces and flags after each
    call. Once ``close()`` has been called, a submission still in flight
    finishes without touching any state.
    """

    def __init__(self, service: IntakeService, draft: BookingRequestDraft | None = None):
        self._service = service
        self.draft = draft or draft_editor.new_draft()
        self.field_errors: dict[str, str] = {}
        self.email_error: str | None = None
        self.terms_error: str | None = None
        self.password_error: str | None = None
        self.submitting = False
        self.submitted = False
        self._alive = True

    @property
    def alive(self) -> bool:
        return self._alive

    def close(self) -> None:
        self._alive = False

    def update_field(self, name: str, value) -> None:
        self.draft = draft_editor.update_field(self.draft, name, value)
        self.field_errors = draft_editor.clear_field_error(self.field_errors, name)
        if name == "email":
            self.email_error = None
        elif name == "terms_accepted" and value:
            self.terms_error = None
        elif name in ("password", "password_confirmation"):
            self.password_error = None

    def add_date_range(self) -> DateRangeEntry:
        self.draft, entry = draft_editor.add_date_range(self.draft)
        return entry

    def remove_date_range(self, entry_id: str) -> None:
        self.draft = draft_editor.remove_date_range(self.draft, entry_id)
        self.field_errors = draft_editor.clear_field_error(
            self.field_errors, start_key(entry_id), end_key(entry_id)
        )

    def update_date_range(
        self, entry_id: str, *, start_date: str | None = None, end_date: str | None = None
    ) -> None:
        self.draft = draft_editor.update_date_range(
            self.draft, entry_id, start_date=start_date, end_date=end_date
        )
        keys = draft_editor.date_range_error_keys(
            entry_id, start=start_date is not None, end=end_date is not None
        )
        self.field_errors = draft_editor.clear_field_error(self.field_errors, *keys)

    def _reset_surfaces(self) -> None:
        self.field_errors = {}
        self.email_error = None
        self.terms_error = None
        self.password_error = None

    def _apply_error(self, exc: IntakeError) -> None:
        if isinstance(exc, TermsNotAcceptedError):
            self.field_errors = exc.errors
            self.terms_error = exc.message
        elif isinstance(exc, InvalidEmailError):
            self.email_error = exc.message
        elif isinstance(exc, FieldValidationError):
            self.field_errors = exc.errors
        elif isinstance(exc, (PasswordPolicyError, PasswordMismatchError)):
            self.password_error = exc.message
        else:
            # duplicate, rejected and transport failures all surface by the email field
            self.email_error = exc.message

    async def submit(self) -> SubmissionResult | None:
        """Submit the current draft. Returns the result on success, else None."""
        if self.submitting:
            return None

        self._reset_surfaces()
        self.submitted = False
        self.submitting = True
        draft = self.draft
        try:
            result = await self._service.submit(draft)
        except IntakeError as exc:
            if self._alive:
                self._apply_error(exc)
            else:
                logger.debug("Discarding submission error for closed session: %s", exc)
            return None
        finally:
            if self._alive:
                self.submitting = False

        if not self._alive:
            logger.debug("Discarding submission result for closed session")
            return result

        self.draft = draft_editor.new_draft()
        self.submitted = True
        return result
