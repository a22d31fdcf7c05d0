"""
Donation endpoints for API v1.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from church_records_api.app.api.deps import get_repositories
from church_records_api.app.api.errors import to_http_exception
from church_records_api.app.core.context import Repositories
from church_records_api.app.core.errors import RecordsError
from church_records_api.app.schemas.donation import DonationListResponse, DonationResponse
from church_records_api.app.services.donation_service import DonationService

router = APIRouter()


@router.post("", response_model=DonationResponse, status_code=status.HTTP_201_CREATED)
async def create_donation(
    payload: Any = Body(...),
    repos: Repositories = Depends(get_repositories),
) -> DonationResponse:
    try:
        donation = DonationService.create_donation(repos, payload)
    except RecordsError as e:
        raise to_http_exception(e, "create the donation") from e
    return DonationResponse(message="Donation created successfully", donation=donation)


@router.get("", response_model=DonationListResponse)
async def list_donations(repos: Repositories = Depends(get_repositories)) -> DonationListResponse:
    try:
        donations = DonationService.list_donations(repos)
    except RecordsError as e:
        raise to_http_exception(e, "retrieve donations") from e
    return DonationListResponse(message="Donations retrieved successfully", donations=donations)
