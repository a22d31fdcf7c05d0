"""
Business logic for contributions (tithes, offerings and pledges).

Creating a contribution is the only operation that reads another
collection: the referenced member must exist.  The field rules run
first, so a malformed payload is a ``ValidationError`` even when the
member is also missing; an unknown member is a
``MemberNotFoundError``.  In both cases nothing is stored.

The contribution keeps a copy of ``memberId``.  Deleting the member
later does not remove or alter its contributions.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from ..core.context import Repositories
from ..core.errors import MemberNotFoundError
from ..schemas.contribution import ContributionRead
from .validation import ensure_member_exists, validate_contribution


class ContributionService:
    """Service class for member contributions."""

    @classmethod
    def create_contribution(cls, repos: Repositories, data: Any) -> ContributionRead:
        """Validate ``data``, check the member and store the contribution.

        ``commitmentDate`` defaults to the creation time when omitted
        (only possible for non‑pledge types); ``fulfillmentDate`` starts
        empty.
        """
        logger = logging.getLogger(__name__)
        fields = validate_contribution(data)
        try:
            ensure_member_exists(repos.members, fields.member_id)
        except MemberNotFoundError:
            logger.warning("Rejected contribution for unknown member %s", fields.member_id)
            raise
        created_at = datetime.now(timezone.utc)
        contribution = ContributionRead(
            id=str(uuid.uuid4()),
            created_at=created_at,
            member_id=fields.member_id,
            type=fields.type,
            amount=fields.amount,
            description=fields.description,
            commitment_date=fields.commitment_date or created_at,
            fulfillment_date=None,
        )
        repos.contributions.insert(contribution.id, contribution)
        logger.info(
            "Created %s contribution %s for member %s",
            contribution.type,
            contribution.id,
            contribution.member_id,
        )
        return contribution

    @classmethod
    def list_contributions(cls, repos: Repositories) -> List[ContributionRead]:
        return repos.contributions.values()
