import asyncio
import logging

import httpx

from staybook.exceptions.custom import IdentityLookupError, InvalidEmailError
from staybook.mappers.email import emails_match, normalize_email
from staybook.schemas.identity import EmailCheck, IdentityRecord, IdentityTable

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"


class IdentityLookupService:
    """Reads the contractor and landlord identity tables to vet a new email."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
    ):
        self._client = client
        self._base_url = base_url.rstrip("/") + REST_PATH
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
        }
        self._timeout = timeout

    def table_url(self, table: IdentityTable) -> str:
        return f"{self._base_url}/{table}"

    async def list_identities(self, table: IdentityTable) -> list[IdentityRecord]:
        try:
            resp = await asyncio.wait_for(
                self._client.get(
                    self.table_url(table),
                    params={"select": "id,email"},
                    headers=self._headers,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as exc:
            raise IdentityLookupError(f"{table} lookup timed out") from exc
        except httpx.HTTPError as exc:
            raise IdentityLookupError(f"{table} lookup failed: {exc}") from exc

        if resp.status_code >= 400:
            raise IdentityLookupError(resp.text, status_code=resp.status_code)

        try:
            rows = resp.json()
        except ValueError as exc:
            raise IdentityLookupError(f"{table} returned a malformed body") from exc
        if not isinstance(rows, list):
            raise IdentityLookupError(f"{table} returned a malformed body")

        return [
            IdentityRecord(id=str(row["id"]), email=row.get("email"))
            for row in rows
            if isinstance(row, dict) and row.get("id") is not None
        ]

    async def check_email_uniqueness(self, email: str) -> EmailCheck:
        """Look ``email`` up in both identity tables.

        Fails closed: if either lookup errors or times out the email is
        reported as unusable, never as unique. A blank email raises
        ``InvalidEmailError`` without querying either table.
        """
        normalized = normalize_email(email)
        if not normalized:
            raise InvalidEmailError()
        tables = (IdentityTable.contractor, IdentityTable.landlord)

        results = await asyncio.gather(
            *(self.list_identities(t) for t in tables),
            return_exceptions=True,
        )

        for table, result in zip(tables, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "Identity lookup on %s failed, treating email as taken: %s",
                    table, result,
                )
                return EmailCheck.lookup_failed

        for table, records in zip(tables, results):
            if any(emails_match(r.email, normalized) for r in records):
                logger.info("Email already registered in %s table", table)
                return EmailCheck.already_exists

        return EmailCheck.unique
