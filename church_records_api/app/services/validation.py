"""
Validation rules for every entity type.

Each ``validate_*`` function takes the raw field set decoded from a
request and either returns the typed ``*Create`` model or raises
:class:`~church_records_api.app.core.errors.ValidationError`.  The
reason names the first offending field and whether it was missing or
had the wrong type.  Rules never touch storage, except for
:func:`ensure_member_exists` which performs the read‑only member lookup
needed by contributions.
"""

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import MemberNotFoundError, ValidationError
from ..core.store import EntityStore
from ..schemas.content import ContentCreate
from ..schemas.contribution import PLEDGE, ContributionCreate
from ..schemas.donation import DonationCreate
from ..schemas.event import EventCreate
from ..schemas.member import MemberCreate, MemberRead, MemberUpdate
from ..schemas.prayer_request import PrayerRequestCreate

M = TypeVar("M", bound=BaseModel)


def _describe(exc: PydanticValidationError) -> ValidationError:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else None
    if error["type"] == "missing":
        return ValidationError(f"Missing required field '{field}'", field=field)
    return ValidationError(f"Invalid value for field '{field}': {error['msg']}", field=field)


def _parse(model: Type[M], data: Any) -> M:
    if not isinstance(data, Mapping):
        raise ValidationError("Invalid input: expected an object of fields")
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise _describe(exc) from exc


def validate_member(data: Any) -> MemberCreate:
    return _parse(MemberCreate, data)


def validate_member_update(data: Any) -> MemberUpdate:
    """Replacement values for a member.

    Held to the same rules as creation: all three fields present and
    non‑empty strings.
    """
    return _parse(MemberUpdate, data)


def validate_event(data: Any) -> EventCreate:
    return _parse(EventCreate, data)


def validate_donation(data: Any) -> DonationCreate:
    return _parse(DonationCreate, data)


def validate_contribution(data: Any) -> ContributionCreate:
    """Parse a contribution; a ``Pledge`` must carry a commitment date.

    ``commitmentDate`` is only read for pledges; other types ignore it.
    An empty or zero commitment date counts as missing.
    """
    if isinstance(data, Mapping):
        data = dict(data)
        is_pledge = data.get("type") == PLEDGE
        for key in ("commitmentDate", "commitment_date"):
            if key in data and (not is_pledge or not data[key]):
                del data[key]
    contribution = _parse(ContributionCreate, data)
    if contribution.is_pledge and contribution.commitment_date is None:
        raise ValidationError(
            "Missing required field 'commitmentDate' for a Pledge contribution",
            field="commitmentDate",
        )
    return contribution


def validate_prayer_request(data: Any) -> PrayerRequestCreate:
    return _parse(PrayerRequestCreate, data)


def validate_content(data: Any) -> ContentCreate:
    return _parse(ContentCreate, data)


def ensure_member_exists(members: EntityStore[MemberRead], member_id: str) -> MemberRead:
    """Return the referenced member or raise ``MemberNotFoundError``."""
    member = members.get(member_id)
    if member is None:
        raise MemberNotFoundError(member_id)
    return member
