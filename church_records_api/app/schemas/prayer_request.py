"""
Pydantic models for prayer requests.

``memberId`` is recorded as given; it is not checked against the
member collection.
"""

from typing import List

from pydantic import Field

from .base import NonEmptyStr, RecordModel, StoredRecord


class PrayerRequestBase(RecordModel):
    member_id: NonEmptyStr = Field(..., examples=["9b2f6c1e-8a53-4a43-a6a4-0a1f4f6a8c2d"])
    request: NonEmptyStr = Field(..., examples=["Healing for my mother"])


class PrayerRequestCreate(PrayerRequestBase):
    """Schema for creating a prayer request."""
    pass


class PrayerRequestRead(StoredRecord, PrayerRequestBase):
    """Schema for reading a prayer request."""
    pass


class PrayerRequestResponse(RecordModel):
    message: str
    prayer_request: PrayerRequestRead


class PrayerRequestListResponse(RecordModel):
    message: str
    prayer_requests: List[PrayerRequestRead]
