"""
Pydantic models for published content (sermons, newsletters, ...).
"""

from typing import List

from pydantic import Field

from .base import NonEmptyStr, RecordModel, StoredRecord


class ContentBase(RecordModel):
    type: NonEmptyStr = Field(..., examples=["Sermon"])
    title: NonEmptyStr = Field(..., examples=["The Good Samaritan"])
    content: NonEmptyStr = Field(..., examples=["Go and do likewise."])


class ContentCreate(ContentBase):
    """Schema for creating a content item."""
    pass


class ContentRead(StoredRecord, ContentBase):
    """Schema for reading a content item."""
    pass


class ContentResponse(RecordModel):
    message: str
    content: ContentRead


class ContentListResponse(RecordModel):
    message: str
    content: List[ContentRead]
