"""
Business logic for donations.

``donorId`` is free text and is not checked against the member
collection.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from ..core.context import Repositories
from ..schemas.donation import DonationRead
from .validation import validate_donation

logger = logging.getLogger(__name__)


class DonationService:
    """Service class for donations."""

    @classmethod
    def create_donation(cls, repos: Repositories, data: Any) -> DonationRead:
        fields = validate_donation(data)
        donation = DonationRead(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **fields.model_dump(),
        )
        repos.donations.insert(donation.id, donation)
        logger.info("Created donation %s from %s", donation.id, donation.donor_id)
        return donation

    @classmethod
    def list_donations(cls, repos: Repositories) -> List[DonationRead]:
        return repos.donations.values()
