"""
Event endpoints for API v1.

Events can be created and listed.  ``dateTime`` accepts an ISO‑8601
string or a Unix timestamp.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from church_records_api.app.api.deps import get_repositories
from church_records_api.app.api.errors import to_http_exception
from church_records_api.app.core.context import Repositories
from church_records_api.app.core.errors import RecordsError
from church_records_api.app.schemas.event import EventListResponse, EventResponse
from church_records_api.app.services.event_service import EventService

router = APIRouter()


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repositories),
) -> EventResponse:
    try:
        event = EventService.create_event(repos, payload)
    except RecordsError as e:
        raise to_http_exception(e, "create the event") from e
    return EventResponse(message="Event created successfully", event=event)


@router.get("", response_model=EventListResponse)
async def list_events(repos: Repositories = Depends(get_repositories)) -> EventListResponse:
    try:
        events = EventService.list_events(repos)
    except RecordsError as e:
        raise to_http_exception(e, "retrieve events") from e
    return EventListResponse(message="Events retrieved successfully", events=events)
