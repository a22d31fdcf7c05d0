"""
Content endpoints for API v1.

Sermons, newsletters and other published items.  The list response
carries the items under the ``content`` key.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from church_records_api.app.api.deps import get_repositories
from church_records_api.app.api.errors import to_http_exception
from church_records_api.app.core.context import Repositories
from church_records_api.app.core.errors import RecordsError
from church_records_api.app.schemas.content import ContentListResponse, ContentResponse
from church_records_api.app.services.content_service import ContentService

router = APIRouter()


@router.post("", response_model=ContentResponse, status_code=status.HTTP_201_CREATED)
async def create_content(
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repositories),
) -> ContentResponse:
    try:
        content = ContentService.create_content(repos, payload)
    except RecordsError as e:
        raise to_http_exception(e, "create the content") from e
    return ContentResponse(message="Content created successfully", content=content)


@router.get("", response_model=ContentListResponse)
async def list_contents(repos: Repositories = Depends(get_repositories)) -> ContentListResponse:
    try:
        contents = ContentService.list_contents(repos)
    except RecordsError as e:
        raise to_http_exception(e, "retrieve content") from e
    return ContentListResponse(message="Content retrieved successfully", content=contents)
