"""
Shared building blocks for the entity schemas.

``RecordModel`` maps snake_case attributes to camelCase wire names and
accepts either on input.  ``NonEmptyStr`` and ``Amount`` are the strict
primitive types used by the ``*Create`` models: strings must be real,
non‑empty strings and amounts finite real numbers (booleans are
rejected).
"""

from datetime import datetime
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]

# NaN and infinities cannot be written to the JSON store.
Amount = Union[StrictInt, Annotated[float, Field(strict=True, allow_inf_nan=False)]]


class RecordModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredRecord(RecordModel):
    """Fields assigned to every entity when it is created."""

    id: str = Field(..., examples=["9b2f6c1e-8a53-4a43-a6a4-0a1f4f6a8c2d"])
    created_at: datetime


class Confirmation(RecordModel):
    """Acknowledgement returned by a delete."""

    message: str = Field(..., examples=["Member deleted successfully"])
    id: str


def reject_zero_amount(value: Union[int, float]) -> Union[int, float]:
    # A zero amount counts as a missing amount.
    if value == 0:
        raise ValueError("amount must be a non-zero number")
    return value
