"""
Prayer request endpoints for API v1.

The member ID on a prayer request is stored as given; it is not checked
against the member collection.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from church_records_api.app.api.deps import get_repositories
from church_records_api.app.api.errors import to_http_exception
from church_records_api.app.core.context import Repositories
from church_records_api.app.core.errors import RecordsError
from church_records_api.app.schemas.prayer_request import PrayerRequestListResponse, PrayerRequestResponse
from church_records_api.app.services.prayer_request_service import PrayerRequestService

router = APIRouter()


@router.post("", response_model=PrayerRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_prayer_request(
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repositories),
) -> PrayerRequestResponse:
    try:
        prayer_request = PrayerRequestService.create_prayer_request(repos, payload)
    except RecordsError as e:
        raise to_http_exception(e, "create the prayer request") from e
    return PrayerRequestResponse(message="Prayer request created successfully", prayer_request=prayer_request)


@router.get("", response_model=PrayerRequestListResponse)
async def list_prayer_requests(repos: Repositories = Depends(get_repositories)) -> PrayerRequestListResponse:
    try:
        prayer_requests = PrayerRequestService.list_prayer_requests(repos)
    except RecordsError as e:
        raise to_http_exception(e, "retrieve prayer requests") from e
    return PrayerRequestListResponse(message="Prayer requests retrieved successfully", prayer_requests=prayer_requests)
