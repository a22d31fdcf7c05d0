"""
Pydantic models for member data.

``MemberBase`` holds the three mutable fields; ``MemberCreate`` is the
validated input for a new member, ``MemberUpdate`` the replacement
values for an existing one and ``MemberRead`` the stored record.
"""

from typing import List

from pydantic import Field

from .base import NonEmptyStr, RecordModel, StoredRecord


class MemberBase(RecordModel):
    name: NonEmptyStr = Field(..., examples=["Ana"])
    contact: NonEmptyStr = Field(..., examples=["a@x.com"])
    membership_status: NonEmptyStr = Field(..., examples=["Active"])


class MemberCreate(MemberBase):
    """Schema for creating a member."""
    pass


class MemberUpdate(MemberBase):
    """Schema for updating a member.

    All three fields are required; an update replaces them together.
    """
    pass


class MemberRead(StoredRecord, MemberBase):
    """Schema for reading a member."""
    pass


class MemberResponse(RecordModel):
    message: str
    member: MemberRead


class MemberListResponse(RecordModel):
    message: str
    members: List[MemberRead]
