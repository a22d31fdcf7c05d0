"""
Pydantic models for event data.

``dateTime`` is accepted as an ISO‑8601 string or a Unix timestamp and
stored as a ``datetime``.
"""

from datetime import datetime
from typing import List

from pydantic import Field

from .base import NonEmptyStr, RecordModel, StoredRecord


class EventBase(RecordModel):
    title: NonEmptyStr = Field(..., examples=["Easter Service"])
    description: NonEmptyStr = Field(..., examples=["Sunrise worship in the garden"])
    date_time: datetime = Field(..., examples=["2025-04-20T06:30:00Z"])
    location: NonEmptyStr = Field(..., examples=["Main Hall"])


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventRead(StoredRecord, EventBase):
    """Schema for reading an event."""
    pass


class EventResponse(RecordModel):
    message: str
    event: EventRead


class EventListResponse(RecordModel):
    message: str
    events: List[EventRead]
