"""
Time helpers shared by entities, I/O models and services.

Timestamps are stored as naive UTC datetimes so that every supported database
backend (PostgreSQL, SQLite) compares them the same way.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC. Naive input is assumed to be UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def as_aware_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime read back from the database."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def new_id() -> str:
    """Generate a new primary key value."""
    return str(uuid.uuid4())
