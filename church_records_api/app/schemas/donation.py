"""
Pydantic models for donation data.
"""

from typing import List

from pydantic import Field, field_validator

from .base import Amount, NonEmptyStr, RecordModel, StoredRecord, reject_zero_amount


class DonationBase(RecordModel):
    donor_id: NonEmptyStr = Field(..., examples=["donor-17"])
    amount: Amount = Field(..., examples=[250])

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v):
        return reject_zero_amount(v)


class DonationCreate(DonationBase):
    """Schema for creating a donation."""
    pass


class DonationRead(StoredRecord, DonationBase):
    """Schema for reading a donation."""
    pass


class DonationResponse(RecordModel):
    message: str
    donation: DonationRead


class DonationListResponse(RecordModel):
    message: str
    donations: List[DonationRead]
