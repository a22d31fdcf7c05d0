"""
Contribution endpoints for API v1.

A contribution must reference an existing member.  Field problems are
reported as HTTP 400 and an unknown ``memberId`` as HTTP 404, in that
order of precedence.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from church_records_api.app.api.deps import get_repositories
from church_records_api.app.api.errors import to_http_exception
from church_records_api.app.core.context import Repositories
from church_records_api.app.core.errors import RecordsError
from church_records_api.app.schemas.contribution import (
    ContributionListResponse,
    ContributionResponse,
)
from church_records_api.app.services.contribution_service import ContributionService

router = APIRouter()


@router.post("", response_model=ContributionResponse, status_code=status.HTTP_201_CREATED)
async def create_contribution(
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repositories),
) -> ContributionResponse:
    """Record a tithe, offering or pledge for a member.

    A ``Pledge`` requires ``commitmentDate``.
    """
    try:
        contribution = ContributionService.create_contribution(repos, payload)
    except RecordsError as e:
        raise to_http_exception(e, "create the contribution") from e
    return ContributionResponse(
        message="Contribution created successfully", contribution=contribution
    )


@router.get("", response_model=ContributionListResponse)
async def list_contributions(
    repos: Repositories = Depends(get_repositories),
) -> ContributionListResponse:
    try:
        contributions = ContributionService.list_contributions(repos)
    except RecordsError as e:
        raise to_http_exception(e, "retrieve contributions") from e
    return ContributionListResponse(
        message="Contributions retrieved successfully", contributions=contributions
    )
