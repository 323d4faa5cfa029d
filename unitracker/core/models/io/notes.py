"""
Note I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import Any, ClassVar, FrozenSet, List, Optional

from pydantic import Field, field_validator

from .base import ApiModel, PartialUpdate, UtcDatetime


def clean_tags(value: Any) -> Any:
    """Accept a list or a comma-separated string; trim and drop empty tags."""
    if value is None:
        return value
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, list):
        return [str(tag).strip() for tag in value if str(tag).strip()]
    return value


class NoteRead(ApiModel):
    """Schema for reading a note."""

    id: str
    user_id: str
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    subject: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class NoteCreate(ApiModel):
    """Schema for creating a note."""

    title: str = Field(min_length=1, max_length=500)
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    subject: Optional[str] = Field(default=None, max_length=255)

    _clean_tags = field_validator("tags", mode="before")(clean_tags)


class NoteUpdate(PartialUpdate):
    """Schema for a partial note update."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"subject"})

    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    subject: Optional[str] = Field(default=None, max_length=255)

    _clean_tags = field_validator("tags", mode="before")(clean_tags)
