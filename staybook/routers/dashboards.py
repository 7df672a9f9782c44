import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Query, Request

from staybook.dependencies import RecordsDep, TimezoneDep
from staybook.mappers.dashboard_filters import (
    PARTNER_PROPERTY_FILTERS,
    client_booking_filters,
    split_activity,
    split_listing,
)
from staybook.mappers.filter_engine import FilterEngine
from staybook.schemas.filters import DEFAULT_FILTER_KEY, FilterSelection
from staybook.schemas.records import BookingRecord, PropertyRecord
from staybook.schemas.responses import (
    BookingFilterRequest,
    BookingListResponse,
    PropertyFilterRequest,
    PropertyListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboards")

Tab = Literal["all", "active", "pending"]
PartnerTab = Literal["all", "listed", "delisted"]
FiltersQuery = Annotated[list[str], Query()]


def _selection_from_query(
    request: Request, filters: list[str], engine: FilterEngine
) -> FilterSelection:
    selection = FilterSelection(active_keys=set())
    for key in engine.keys:
        selection.toggle(key, key in filters)
        if key in filters:
            selection.set_value(key, request.query_params.get(key, ""))
    return selection


def _pick_tab(bookings: list[BookingRecord], tab: Tab) -> list[BookingRecord]:
    if tab == "all":
        return bookings
    active, pending = split_activity(bookings)
    return active if tab == "active" else pending


def _pick_partner_tab(properties: list[PropertyRecord], tab: PartnerTab) -> list[PropertyRecord]:
    if tab == "all":
        return properties
    listed, delisted = split_listing(properties)
    return listed if tab == "listed" else delisted


@router.post("/client/bookings/filter", response_model=BookingListResponse)
async def filter_client_bookings(
    body: BookingFilterRequest, tz: TimezoneDep, tab: Tab = "all"
) -> BookingListResponse:
    records = _pick_tab(body.records, tab)
    results = client_booking_filters(tz).apply_selection(records, body.selection)
    return BookingListResponse(total=len(records), matched=len(results), results=results)


@router.post("/partner/properties/filter", response_model=PropertyListResponse)
async def filter_partner_properties(
    body: PropertyFilterRequest, tab: PartnerTab = "all"
) -> PropertyListResponse:
    records = _pick_partner_tab(body.records, tab)
    results = PARTNER_PROPERTY_FILTERS.apply_selection(records, body.selection)
    return PropertyListResponse(total=len(records), matched=len(results), results=results)


@router.get("/client/{contractor_id}/bookings", response_model=BookingListResponse)
async def list_client_bookings(
    contractor_id: str,
    request: Request,
    records: RecordsDep,
    tz: TimezoneDep,
    tab: Tab = "all",
    filters: FiltersQuery = [DEFAULT_FILTER_KEY],
) -> BookingListResponse:
    bookings = _pick_tab(await records.fetch_client_bookings(contractor_id), tab)
    engine = client_booking_filters(tz)
    results = engine.apply_selection(bookings, _selection_from_query(request, filters, engine))
    return BookingListResponse(total=len(bookings), matched=len(results), results=results)


@router.get("/partner/{landlord_id}/properties", response_model=PropertyListResponse)
async def list_partner_properties(
    landlord_id: str,
    request: Request,
    records: RecordsDep,
    tab: PartnerTab = "all",
    filters: FiltersQuery = [DEFAULT_FILTER_KEY],
) -> PropertyListResponse:
    properties = _pick_partner_tab(await records.fetch_partner_properties(landlord_id), tab)
    selection = _selection_from_query(request, filters, PARTNER_PROPERTY_FILTERS)
    results = PARTNER_PROPERTY_FILTERS.apply_selection(properties, selection)
    return PropertyListResponse(
        total=len(properties), matched=len(results), results=results
    )
