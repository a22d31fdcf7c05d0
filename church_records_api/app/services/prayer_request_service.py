"""
Business logic for prayer requests.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from ..core.context import Repositories
from ..schemas.prayer_request import PrayerRequestRead
from .validation import validate_prayer_request

logger = logging.getLogger(__name__)


class PrayerRequestService:
    """Service class for prayer requests."""

    @classmethod
    def create_prayer_request(cls, repos: Repositories, data: Any) -> PrayerRequestRead:
        """Store a prayer request.

        ``memberId`` must be a non‑empty string but is not required to
        name an existing member.
        """
        fields = validate_prayer_request(data)
        prayer_request = PrayerRequestRead(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **fields.model_dump(),
        )
        repos.prayer_requests.insert(prayer_request.id, prayer_request)
        logger.info("Created prayer request %s", prayer_request.id)
        return prayer_request

    @classmethod
    def list_prayer_requests(cls, repos: Repositories) -> List[PrayerRequestRead]:
        return repos.prayer_requests.values()
