DUPLICATE_EMAIL_MESSAGE = "This email is already in use, Try a different email."
INVALID_EMAIL_MESSAGE = "Please enter a valid email address."
TERMS_MESSAGE = "You must agree to the client terms and conditions"
PASSWORD_MISMATCH_MESSAGE = "Passwords do not match. Please try again."


class IntakeError(Exception):
    """Base for every reason a booking request is not submitted."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FieldValidationError(IntakeError):
    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(f"{len(errors)} field(s) need attention")


class InvalidEmailError(FieldValidationError):
    def __init__(self):
        super().__init__({"email": INVALID_EMAIL_MESSAGE})
        self.message = INVALID_EMAIL_MESSAGE


class TermsNotAcceptedError(IntakeError):
    def __init__(self, errors: dict[str, str] | None = None):
        self.errors = errors or {}
        super().__init__(TERMS_MESSAGE)


class DuplicateEmailError(IntakeError):
    def __init__(self, reason: str = "exists"):
        # reason: "exists" | "lookup_failed" | "backend"
        self.reason = reason
        super().__init__(DUPLICATE_EMAIL_MESSAGE)


class PasswordPolicyError(IntakeError):
    def __init__(self, unmet: list[str], message: str):
        self.unmet = unmet
        super().__init__(message)


class PasswordMismatchError(IntakeError):
    def __init__(self):
        super().__init__(PASSWORD_MISMATCH_MESSAGE)


class SubmissionRejectedError(IntakeError):
    """Backend refused the request with a message unrelated to the email."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class SubmissionTransportError(IntakeError):
    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(DUPLICATE_EMAIL_MESSAGE)


class LastDateRangeError(Exception):
    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Cannot remove the only date range ({entry_id})")


class IdentityLookupError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RecordsFetchError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)
