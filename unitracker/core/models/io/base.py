"""
Shared base for API I/O models.

The web client speaks camelCase JSON; Python code uses snake_case. Every I/O
model accepts either spelling on input and emits camelCase on output.
Datetimes are normalised to naive UTC on the way in and written with an
explicit UTC offset on the way out.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from unitracker.core.time_utils import as_aware_utc, to_naive_utc


class ApiModel(BaseModel):
    """Base for every request and response body."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _serialize_utc(value: datetime) -> str:
    return as_aware_utc(value).isoformat().replace("+00:00", "Z")


# Incoming timestamps: any offset accepted, stored as naive UTC.
InputDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]

# Outgoing timestamps: always ISO 8601 with a trailing ``Z``.
UtcDatetime = Annotated[datetime, PlainSerializer(_serialize_utc, return_type=str, when_used="json")]

OptionalUtcDatetime = Optional[UtcDatetime]


class MessageResponse(ApiModel):
    """Plain acknowledgement body."""

    message: str


class PartialUpdate(ApiModel):
    """Base for PUT/PATCH bodies where every field is optional.

    Only the fields the client sent are applied. An explicit ``null`` is kept
    for columns listed in ``nullable_fields`` and dropped for the rest.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def changes(self) -> Dict[str, Any]:
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.nullable_fields
        }
