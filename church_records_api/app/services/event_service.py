"""
Business logic for events.

Events are append‑only: they can be created and listed.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from ..core.context import Repositories
from ..schemas.event import EventRead
from .validation import validate_event

logger = logging.getLogger(__name__)


class EventService:
    """Service class for church events."""

    @classmethod
    def create_event(cls, repos: Repositories, data: Any) -> EventRead:
        """Validate ``data`` and store a new event.

        ``dateTime`` may be an ISO‑8601 string or a Unix timestamp.
        """
        fields = validate_event(data)
        event = EventRead(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **fields.model_dump(),
        )
        repos.events.insert(event.id, event)
        logger.info("Created event %s (%s)", event.id, event.title)
        return event

    @classmethod
    def list_events(cls, repos: Repositories) -> List[EventRead]:
        return repos.events.values()
