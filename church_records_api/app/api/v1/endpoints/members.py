"""
Member endpoints for API v1.

Members support the full CRUD surface.  Request bodies are taken as raw
JSON objects so that the service's validation rules produce the error
reason returned to the client.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from church_records_api.app.api.deps import get_repositories
from church_records_api.app.api.errors import to_http_exception
from church_records_api.app.core.context import Repositories
from church_records_api.app.core.errors import RecordsError
from church_records_api.app.schemas.base import Confirmation
from church_records_api.app.schemas.member import (
    MemberListResponse,
    MemberRead,
    MemberResponse,
)
from church_records_api.app.services.member_service import MemberService

router = APIRouter()


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
async def create_member(
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repositories),
) -> MemberResponse:
    """Register a new member.

    ``name``, ``contact`` and ``membershipStatus`` must be non‑empty
    strings; otherwise HTTP 400 is returned.
    """
    try:
        member = MemberService.create_member(repos, payload)
    except RecordsError as e:
        raise to_http_exception(e, "create the member") from e
    return MemberResponse(message="Member created successfully", member=member)


@router.get("", response_model=MemberListResponse)
async def list_members(repos: Repositories = Depends(get_repositories)) -> MemberListResponse:
    try:
        members = MemberService.list_members(repos)
    except RecordsError as e:
        raise to_http_exception(e, "retrieve members") from e
    return MemberListResponse(message="Members retrieved successfully", members=members)


@router.get("/{member_id}", response_model=MemberRead)
async def get_member(
    member_id: str,
    repos: Repositories = Depends(get_repositories),
) -> MemberRead:
    """Retrieve a single member by ID.  Raises 404 if not found."""
    try:
        return MemberService.get_member(repos, member_id)
    except RecordsError as e:
        raise to_http_exception(e, "retrieve the member") from e


@router.put("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: str,
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repositories),
) -> MemberResponse:
    """Replace a member's name, contact and membership status.

    Returns 404 for an unknown member and 400 for incomplete data.
    """
    try:
        member = MemberService.update_member(repos, member_id, payload)
    except RecordsError as e:
        raise to_http_exception(e, "update the member") from e
    return MemberResponse(message="Member updated successfully", member=member)


@router.delete("/{member_id}", response_model=Confirmation)
async def delete_member(
    member_id: str,
    repos: Repositories = Depends(get_repositories),
) -> Confirmation:
    """Delete a member.  Contributions referencing it are kept."""
    try:
        return MemberService.delete_member(repos, member_id)
    except RecordsError as e:
        raise to_http_exception(e, "delete the member") from e
