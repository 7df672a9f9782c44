import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_entry_id() -> str:
    return uuid.uuid4().hex[:8]


class DateRangeEntry(BaseModel):
    id: str = Field(default_factory=new_entry_id)
    start_date: str = ""  # ISO calendar date, "" when unset
    end_date: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.start_date.strip() and self.end_date.strip())


class BookingRequestDraft(BaseModel):
    requester_name: str = ""
    company_name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    password_confirmation: str = ""
    city: str = ""
    postcode: str = ""
    team_size: str = ""  # raw text as typed, parsed on submit
    budget_per_night: float | None = Field(default=None, ge=0)
    booking_date_ranges: list[DateRangeEntry] = Field(
        default_factory=lambda: [DateRangeEntry()]
    )
    terms_accepted: bool = False

    @field_validator("budget_per_night", mode="before")
    @classmethod
    def _blank_budget_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class BookingDates(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")


class BookingRequestPayload(BaseModel):
    """Wire body for ``POST /api/booking-requests``."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(alias="fullName")
    company_name: str = Field(alias="companyName")
    email: str
    phone: str
    project_postcode: str = Field(alias="projectPostcode")
    password: str
    bookings: list[BookingDates] = []
    team_size: int | None = Field(default=None, alias="teamSize")
    budget_per_person: float | None = Field(default=None, alias="budgetPerPerson")
    city: str
    terms_accepted: bool = Field(alias="termsAccepted")


class SubmissionResult(BaseModel):
    success: bool = True
    message: str | None = None
    booking_request_id: str | None = None
    booking_dates: list[dict] = []
