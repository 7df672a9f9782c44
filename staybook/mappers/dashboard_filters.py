"""Filter tables for the client (contractor) and partner (landlord) dashboards."""

from zoneinfo import ZoneInfo

from staybook.mappers.filter_engine import FilterEngine, contains_any, equals, same_day
from staybook.schemas.records import BookingRecord, BookingStatus, PropertyRecord

ACTIVE_STATUSES = {BookingStatus.confirmed, BookingStatus.paid}
LISTED_ACTIVITY = "active"
DELISTED_ACTIVITY = "inactive"


def client_booking_filters(tz: ZoneInfo | None = None) -> FilterEngine:
    return FilterEngine({
        "search": contains_any(
            lambda b: b.property.title,
            lambda b: b.property.address,
        ),
        "postcode": contains_any(lambda b: b.property.address),
        "startDate": same_day(lambda b: b.start_date, tz),
        "endDate": same_day(lambda b: b.end_date, tz),
    })


def partner_property_filters() -> FilterEngine:
    return FilterEngine({
        "search": contains_any(
            lambda p: p.property_name,
            lambda p: p.house_address,
            lambda p: p.postcode,
            lambda p: p.property_type,
        ),
        "postcode": contains_any(lambda p: p.postcode, lambda p: p.house_address),
        "property_type": equals(lambda p: p.property_type),
        "parking_type": equals(lambda p: p.parking_type),
    })


CLIENT_BOOKING_FILTERS = client_booking_filters()
PARTNER_PROPERTY_FILTERS = partner_property_filters()


def split_activity(
    bookings: list[BookingRecord],
) -> tuple[list[BookingRecord], list[BookingRecord]]:
    """Split into (active, pending) as shown on the client dashboard tabs."""
    active = [b for b in bookings if b.status in ACTIVE_STATUSES]
    pending = [b for b in bookings if b.status == BookingStatus.pending]
    return active, pending



def split_listing(
    properties: list[PropertyRecord],
) -> tuple[list[PropertyRecord], list[PropertyRecord]]:
    """Split into (listed, delisted) for the partner dashboard tabs.

    Properties with any other activity value appear in neither tab.
    """
    listed = [p for p in properties if p.activity == LISTED_ACTIVITY]
    delisted = [p for p in properties if p.activity == DELISTED_ACTIVITY]
    return listed, delisted
