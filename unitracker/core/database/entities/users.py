"""
User entity model.

Authentication is stubbed, so in practice the table holds the demo account,
but every other table still references it by ``user_id``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from unitracker.core.time_utils import new_id, utc_now

from ..base import Base, naive_datetime_column_type


class User(Base, table=True):
    """Account and profile details.

    Table: users
    """

    __tablename__ = "users"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    email: Optional[str] = Field(default=None, max_length=255, unique=True)
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    profile_image_url: Optional[str] = Field(default=None, max_length=1024)

    # Profile
    major: Optional[str] = Field(default=None, max_length=255)
    hobbies: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_type=naive_datetime_column_type())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=naive_datetime_column_type())

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
