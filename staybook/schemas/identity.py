from enum import StrEnum

from pydantic import BaseModel


class IdentityTable(StrEnum):
    contractor = "contractor"
    landlord = "landlord"


class IdentityRecord(BaseModel):
    id: str
    email: str | None = None


class EmailCheck(StrEnum):
    unique = "unique"
    already_exists = "already_exists"
    lookup_failed = "lookup_failed"
