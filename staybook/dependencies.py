from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import Depends, Request

from staybook.services.identity_lookup import IdentityLookupService
from staybook.services.intake import IntakeService
from staybook.services.records import RecordsService


def get_intake_service(request: Request) -> IntakeService:
    return request.app.state.intake_service


def get_identity_lookup(request: Request) -> IdentityLookupService:
    return request.app.state.identity_lookup


def get_records_service(request: Request) -> RecordsService:
    return request.app.state.records_service


def get_dashboard_timezone(request: Request) -> ZoneInfo | None:
    return getattr(request.app.state, "dashboard_timezone", None)


IntakeDep = Annotated[IntakeService, Depends(get_intake_service)]
IdentityLookupDep = Annotated[IdentityLookupService, Depends(get_identity_lookup)]
RecordsDep = Annotated[RecordsService, Depends(get_records_service)]
TimezoneDep = Annotated[ZoneInfo | None, Depends(get_dashboard_timezone)]
