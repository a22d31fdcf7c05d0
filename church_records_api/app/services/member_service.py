"""
Business logic for members.

Members are the only entity with the full CRUD surface: create, list,
get, update and delete.  An update replaces name, contact and
membership status together and keeps the existing ``id`` and
``createdAt``.  Deleting a member leaves contributions that reference
it untouched.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from ..core.context import Repositories
from ..core.errors import NotFoundError
from ..schemas.base import Confirmation
from ..schemas.member import MemberRead
from .validation import validate_member, validate_member_update


class MemberService:
    """Service class for managing members."""

    @classmethod
    def create_member(cls, repos: Repositories, data: Any) -> MemberRead:
        """Validate ``data`` and store a new member.

        Raises ``ValidationError`` before anything is written if a field
        is missing or not a non‑empty string.
        """
        logger = logging.getLogger(__name__)
        fields = validate_member(data)
        member = MemberRead(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **fields.model_dump(),
        )
        repos.members.insert(member.id, member)
        logger.info("Created member %s", member.id)
        return member

    @classmethod
    def list_members(cls, repos: Repositories) -> List[MemberRead]:
        return repos.members.values()

    @classmethod
    def get_member(cls, repos: Repositories, member_id: str) -> MemberRead:
        member = repos.members.get(member_id)
        if member is None:
            raise NotFoundError("Member", member_id)
        return member

    @classmethod
    def update_member(cls, repos: Repositories, member_id: str, data: Any) -> MemberRead:
        """Replace the mutable fields of an existing member.

        The lookup happens first, so an unknown ``member_id`` is reported
        as ``NotFoundError`` even when ``data`` is also invalid.
        """
        logger = logging.getLogger(__name__)
        member = cls.get_member(repos, member_id)
        fields = validate_member_update(data)
        updated = member.model_copy(update=fields.model_dump())
        repos.members.insert(member_id, updated)
        logger.info("Updated member %s", member_id)
        return updated

    @classmethod
    def delete_member(cls, repos: Repositories, member_id: str) -> Confirmation:
        logger = logging.getLogger(__name__)
        cls.get_member(repos, member_id)
        repos.members.remove(member_id)
        logger.info("Deleted member %s", member_id)
        return Confirmation(message="Member deleted successfully", id=member_id)
