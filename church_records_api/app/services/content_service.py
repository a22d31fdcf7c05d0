"""
Business logic for published content such as sermons and newsletters.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, List

from ..core.context import Repositories
from ..schemas.content import ContentRead
from .validation import validate_content

logger = logging.getLogger(__name__)


class ContentService:
    """Service class for content items."""

    @classmethod
    def create_content(cls, repos: Repositories, data: Any) -> ContentRead:
        fields = validate_content(data)
        content = ContentRead(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **fields.model_dump(),
        )
        repos.contents.insert(content.id, content)
        logger.info("Created %s content %s", content.type, content.id)
        return content

    @classmethod
    def list_contents(cls, repos: Repositories) -> List[ContentRead]:
        return repos.contents.values()
