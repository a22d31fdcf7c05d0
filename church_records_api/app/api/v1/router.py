"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.  When
a new entity type is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import contents, contributions, donations, events, members, prayer_requests

router = APIRouter()

router.include_router(members.router, prefix="/members", tags=["members"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(donations.router, prefix="/donations", tags=["donations"])
router.include_router(contributions.router, prefix="/contributions", tags=["contributions"])
router.include_router(prayer_requests.router, prefix="/prayer-requests", tags=["prayer requests"])
router.include_router(contents.router, prefix="/contents", tags=["contents"])
