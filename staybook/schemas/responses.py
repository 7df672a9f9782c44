from pydantic import BaseModel, Field

from staybook.schemas.filters import FilterSelection
from staybook.schemas.identity import EmailCheck
from staybook.schemas.records import BookingRecord, PropertyRecord


class ValidationReport(BaseModel):
    valid: bool
    field_errors: dict[str, str] = {}
    terms_error: str | None = None
    password_requirements: list[str] = []
    password_mismatch: bool = False


class EmailCheckRequest(BaseModel):
    email: str


class EmailCheckResponse(BaseModel):
    email: str
    status: EmailCheck


class SubmissionResponse(BaseModel):
    success: bool
    message: str
    booking_request_id: str | None = None


class BookingFilterRequest(BaseModel):
    records: list[BookingRecord]
    selection: FilterSelection = Field(default_factory=FilterSelection)


class PropertyFilterRequest(BaseModel):
    records: list[PropertyRecord]
    selection: FilterSelection = Field(default_factory=FilterSelection)


class BookingListResponse(BaseModel):
    total: int
    matched: int
    results: list[BookingRecord]


class PropertyListResponse(BaseModel):
    total: int
    matched: int
    results: list[PropertyRecord]
