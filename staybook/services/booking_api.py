import logging

import httpx

from staybook.exceptions.custom import BookingApiError, SubmissionTransportError
from staybook.schemas.intake import BookingRequestPayload, SubmissionResult

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/api/booking-requests"


class BookingApiService:
    def __init__(self, client: httpx.AsyncClient, base_url: str, timeout: float = 30.0):
        self._client = client
        self._url = base_url.rstrip("/") + SUBMIT_PATH
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    async def submit(self, payload: BookingRequestPayload) -> SubmissionResult:
        body = payload.model_dump(by_alias=True)
        logger.info(
            "Submitting booking request for %s with %d date range(s)",
            payload.email, len(payload.bookings),
        )
        try:
            resp = await self._client.post(self._url, json=body, timeout=self._timeout)
        except httpx.HTTPError as exc:
            logger.exception("Booking request submission failed")
            raise SubmissionTransportError(str(exc)) from exc

        if resp.is_success:
            return self._parse_success(resp)

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("Unparseable error body from booking API (status=%s)", resp.status_code)
            raise SubmissionTransportError(resp.text) from exc

        message = data.get("error") if isinstance(data, dict) else None
        raise BookingApiError(message or "", status_code=resp.status_code)

    def _parse_success(self, resp: httpx.Response) -> SubmissionResult:
        try:
            data = resp.json()
        except ValueError:
            return SubmissionResult()
        if not isinstance(data, dict):
            return SubmissionResult()

        request = data.get("bookingRequest") or {}
        return SubmissionResult(
            success=bool(data.get("success", True)),
            message=data.get("message"),
            booking_request_id=str(request["id"]) if request.get("id") is not None else None,
            booking_dates=data.get("bookingDates") or [],
        )
