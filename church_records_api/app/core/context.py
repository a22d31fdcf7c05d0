"""
Service context holding the entity stores.

``Repositories`` bundles one :class:`EntityStore` per entity type.  It is
built once by :func:`init_repositories` and passed explicitly to every
service operation; nothing in the service layer reaches for a global
store.  Tests build a fresh context per test on a temporary database.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..schemas.content import ContentRead
from ..schemas.contribution import ContributionRead
from ..schemas.donation import DonationRead
from ..schemas.event import EventRead
from ..schemas.member import MemberRead
from ..schemas.prayer_request import PrayerRequestRead
from . import db
from .store import EntityStore

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    """The six entity collections of one database."""

    members: EntityStore[MemberRead]
    events: EntityStore[EventRead]
    donations: EntityStore[DonationRead]
    contributions: EntityStore[ContributionRead]
    prayer_requests: EntityStore[PrayerRequestRead]
    contents: EntityStore[ContentRead]


def init_repositories(db_path: Optional[str] = None) -> Repositories:
    """Apply migrations to ``db_path`` and return stores bound to it.

    ``db_path`` defaults to the configured ``DATABASE_URL``.
    """
    path = db.get_database_path(db_path)
    db.init_db(path)
    logger.info("Initialised entity stores at %s", path)
    return Repositories(
        members=EntityStore(path, db.MEMBERS, MemberRead),
        events=EntityStore(path, db.EVENTS, EventRead),
        donations=EntityStore(path, db.DONATIONS, DonationRead),
        contributions=EntityStore(path, db.CONTRIBUTIONS, ContributionRead),
        prayer_requests=EntityStore(path, db.PRAYER_REQUESTS, PrayerRequestRead),
        contents=EntityStore(path, db.CONTENTS, ContentRead),
    )
