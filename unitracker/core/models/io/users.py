"""
User and profile I/O models.
"""

from __future__ import annotations

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .base import ApiModel, OptionalUtcDatetime, PartialUpdate, UtcDatetime


class UserRead(ApiModel):
    """Schema for reading the acting user."""

    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    major: Optional[str] = None
    hobbies: Optional[str] = None
    created_at: OptionalUtcDatetime = None
    updated_at: UtcDatetime


class ProfileUpdate(PartialUpdate):
    """Schema for editing the profile. Only sent fields change."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"first_name", "last_name", "major", "hobbies", "profile_image_url"}
    )

    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    major: Optional[str] = Field(default=None, max_length=255)
    hobbies: Optional[str] = None
    profile_image_url: Optional[str] = Field(default=None, max_length=1024)
