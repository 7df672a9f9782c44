import logging

import httpx
from pydantic import BaseModel, ValidationError

from staybook.exceptions.custom import RecordsFetchError
from staybook.schemas.records import BookingRecord, PropertyRecord

logger = logging.getLogger(__name__)

BOOKING_SELECT = (
    "id,property_id,booking_request_id,start_date,end_date,status,created_at,value,"
    "property:properties(title,address,price)"
)


def _drop_nulls(row: dict) -> dict:
    """Null columns fall back to the model defaults, embedded rows included."""
    return {
        key: _drop_nulls(value) if isinstance(value, dict) else value
        for key, value in row.items()
        if value is not None
    }


class RecordsService:
    """Fetches the records each dashboard filters in memory."""

    def __init__(self, client: httpx.AsyncClient, base_url: str, api_key: str):
        self._client = client
        self._base_url = base_url.rstrip("/") + "/rest/v1"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
        }

    async def _get_rows(self, table: str, params: dict[str, str]) -> list[dict]:
        try:
            resp = await self._client.get(
                f"{self._base_url}/{table}", params=params, headers=self._headers
            )
        except httpx.HTTPError as exc:
            raise RecordsFetchError(f"{table} fetch failed: {exc}") from exc

        if resp.status_code >= 400:
            raise RecordsFetchError(resp.text, status_code=resp.status_code)
        try:
            rows = resp.json()
        except ValueError as exc:
            raise RecordsFetchError(f"{table} returned a malformed body") from exc
        if not isinstance(rows, list):
            raise RecordsFetchError(f"{table} returned a malformed body")
        return rows

    def _parse_rows(self, table: str, model: type[BaseModel], rows: list) -> list:
        records = []
        for row in rows:
            if not isinstance(row, dict):
                logger.warning("Skipping non-object row from %s: %r", table, row)
                continue
            try:
                records.append(model.model_validate(_drop_nulls(row)))
            except ValidationError as exc:
                logger.warning("Skipping invalid %s row %s: %s", table, row.get("id"), exc)
        return records

    async def fetch_client_bookings(self, contractor_id: str) -> list[BookingRecord]:
        rows = await self._get_rows(
            "bookings",
            {
                "select": BOOKING_SELECT,
                "contractor_id": f"eq.{contractor_id}",
                "order": "created_at.desc",
            },
        )
        bookings = self._parse_rows("bookings", BookingRecord, rows)
        logger.info("Fetched %d bookings for contractor %s", len(bookings), contractor_id)
        return bookings

    async def fetch_partner_properties(self, landlord_id: str) -> list[PropertyRecord]:
        rows = await self._get_rows(
            "properties",
            {"select": "*", "landlord_id": f"eq.{landlord_id}"},
        )
        properties = self._parse_rows("properties", PropertyRecord, rows)
        logger.info("Fetched %d properties for landlord %s", len(properties), landlord_id)
        return properties
