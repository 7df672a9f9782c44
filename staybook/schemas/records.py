from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class BookingStatus(StrEnum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    paid = "paid"


class BookedProperty(BaseModel):
    title: str = ""
    address: str = ""
    price: float | None = None


class BookingRecord(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    property_id: str | None = None
    booking_request_id: str | None = None
    start_date: str
    end_date: str
    status: BookingStatus = BookingStatus.pending
    created_at: str | None = None
    property: BookedProperty = Field(default_factory=BookedProperty)
    value: float | str | None = None


class PropertyRecord(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    property_name: str = ""
    house_address: str = ""
    locality: str | None = None
    city: str = ""
    county: str | None = None
    country: str = ""
    postcode: str = ""
    property_type: str = ""
    parking_type: str | None = None
    bedrooms: int | None = None
    beds: int | None = None
    bathrooms: int | None = None
    max_occupancy: int | None = None
    # "active" when listed, "inactive" when delisted
    activity: str | None = None
