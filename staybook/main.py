import logging
import sys
from contextlib import asynccontextmanager
from zoneinfo import ZoneInfo

import httpx
from fastapi import FastAPI

from staybook.config import Settings
from staybook.exceptions.custom import IntakeError, RecordsFetchError
from staybook.exceptions.handlers import (
    intake_error_handler,
    records_fetch_error_handler,
)
from staybook.routers.booking_requests import router as booking_requests_router
from staybook.routers.dashboards import router as dashboards_router
from staybook.services.booking_api import BookingApiService
from staybook.services.identity_lookup import IdentityLookupService
from staybook.services.intake import IntakeService
from staybook.services.records import RecordsService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=30.0) as client:
        lookup = IdentityLookupService(
            client,
            settings.supabase_url,
            settings.supabase_key,
            timeout=settings.lookup_timeout,
        )
        booking_api = BookingApiService(
            client, settings.booking_api_url, timeout=settings.submission_timeout
        )

        app.state.identity_lookup = lookup
        app.state.intake_service = IntakeService(lookup, booking_api)
        app.state.records_service = RecordsService(
            client, settings.supabase_url, settings.supabase_key
        )
        app.state.dashboard_timezone = (
            ZoneInfo(settings.dashboard_timezone) if settings.dashboard_timezone else None
        )

        yield


app = FastAPI(title="Staybook", lifespan=lifespan)

app.add_exception_handler(IntakeError, intake_error_handler)
app.add_exception_handler(RecordsFetchError, records_fetch_error_handler)

app.include_router(booking_requests_router)
app.include_router(dashboards_router)
