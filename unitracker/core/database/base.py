"""
Base database models and utilities.

This module provides the foundational database components used across
all entities in the database layer using SQLModel.
"""

from __future__ import annotations

from enum import Enum
from typing import Type

import sqlalchemy as sa
from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def enum_column_type(enum_cls: Type[Enum], length: int = 16) -> sa.Enum:
    """Store an enum by its value in a plain VARCHAR column."""
    return sa.Enum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        length=length,
    )


def naive_datetime_column_type() -> sa.DateTime:
    """A timezone-naive DATETIME column holding UTC values written by :func:`utc_now`."""
    return sa.DateTime(timezone=False)
