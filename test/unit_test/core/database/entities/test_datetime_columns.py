"""Unit tests for how entity timestamps are mapped and stored.

Timestamps are naive UTC values; every datetime column must accept them on
insert and hand them back unchanged.
"""

from __future__ import annotations

from datetime import datetime

import pytest
import sqlalchemy as sa
from sqlmodel import SQLModel

from unitracker.core.database.entities.study_sessions import StudySession
from unitracker.core.database.entities.tasks import Task


def _datetime_columns():
    for table in SQLModel.metadata.sorted_tables:
        for column in table.columns:
            if isinstance(column.type, sa.DateTime):
                yield table.name, column


class TestDatetimeColumnTypes:
    def test_every_datetime_column_is_naive(self):
        columns = list(_datetime_columns())

        assert columns
        for table_name, column in columns:
            assert type(column.type) is sa.DateTime, f"{table_name}.{column.name}"
            assert column.type.timezone is False, f"{table_name}.{column.name}"


class TestDatetimeRoundTrip:
    async def test_task_timestamps_round_trip(self, repos, user):
        due = datetime(2024, 6, 1, 9, 30)
        task = await repos.tasks.create(Task(user_id=user.id, title="Essay", due_date=due))

        repos.session.expunge_all()
        stored = await repos.tasks.get_by_id(task.id)

        assert stored.due_date == due
        assert stored.due_date.tzinfo is None
        assert stored.created_at.tzinfo is None

    async def test_study_session_update_round_trip(self, repos, user):
        session = await repos.study_sessions.create(
            StudySession(user_id=user.id, subject="Maths", start_time=datetime(2024, 6, 1, 9, 0), duration=0)
        )
        session.end_time = datetime(2024, 6, 1, 9, 45)
        await repos.study_sessions.update(session)

        repos.session.expunge_all()
        stored = await repos.study_sessions.get_by_id(session.id)

        assert stored.start_time == datetime(2024, 6, 1, 9, 0)
        assert stored.end_time == datetime(2024, 6, 1, 9, 45)

    @pytest.mark.parametrize("attribute", ["created_at", "updated_at"])
    async def test_user_timestamps_are_naive(self, repos, user, attribute):
        repos.session.expunge_all()
        stored = await repos.users.get_by_id(user.id)

        assert getattr(stored, attribute).tzinfo is None
