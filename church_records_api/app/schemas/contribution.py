"""
Pydantic models for member contributions.

A contribution is a tithe, an offering or a pledge made by a registered
member.  ``type`` is free text; the value ``"Pledge"`` marks a promised
future payment and requires an explicit ``commitmentDate`` (enforced by
the validation rules).  When no commitment date is supplied it defaults
to the creation time.  ``fulfillmentDate`` is empty until the pledge is
fulfilled.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .base import Amount, NonEmptyStr, RecordModel, StoredRecord, reject_zero_amount

PLEDGE = "Pledge"


class ContributionBase(RecordModel):
    member_id: NonEmptyStr = Field(..., examples=["9b2f6c1e-8a53-4a43-a6a4-0a1f4f6a8c2d"])
    type: NonEmptyStr = Field(..., examples=["Tithe"], description="Tithe, Offering, Pledge, ...")
    amount: Amount = Field(..., examples=[50])
    description: NonEmptyStr = Field(..., examples=["Sunday"])

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v):
        return reject_zero_amount(v)


class ContributionCreate(ContributionBase):
    """Schema for creating a contribution."""

    commitment_date: Optional[datetime] = Field(None, examples=["2025-12-01T00:00:00Z"])

    @property
    def is_pledge(self) -> bool:
        return self.type == PLEDGE


class ContributionRead(StoredRecord, ContributionBase):
    """Schema for reading a contribution."""

    commitment_date: datetime
    fulfillment_date: Optional[datetime] = None


class ContributionResponse(RecordModel):
    message: str
    contribution: ContributionRead


class ContributionListResponse(RecordModel):
    message: str
    contributions: List[ContributionRead]
