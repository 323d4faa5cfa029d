"""Unit tests for the preferences repository upsert."""

from __future__ import annotations

import asyncio

from unitracker.core.database.entities.user_preferences import DEFAULT_POMODORO_MINUTES
from unitracker.core.database.entities.users import User
from unitracker.core.database.repositories import build_sql_repos_from_session
from unitracker.core.database.utils import create_sessionmaker


class TestUserPreferencesRepository:
    async def test_get_missing(self, repos, user):
        assert await repos.preferences.get_by_user(user.id) is None

    async def test_upsert_creates_with_defaults(self, repos, user):
        preferences = await repos.preferences.upsert(user.id, {"theme": "dark"})

        assert preferences.theme == "dark"
        assert preferences.pomodoro_duration == DEFAULT_POMODORO_MINUTES
        assert preferences.short_break_duration == 5
        assert preferences.long_break_duration == 15
        assert preferences.long_break_interval == 4
        assert preferences.daily_goal_hours == 4
        assert preferences.sound_enabled is True
        assert preferences.focus_sound == "none"

    async def test_upsert_updates_single_row(self, repos, user):
        first = await repos.preferences.upsert(user.id, {"theme": "dark"})
        second = await repos.preferences.upsert(user.id, {"pomodoro_duration": 50})

        assert second.id == first.id
        assert second.theme == "dark"
        assert second.pomodoro_duration == 50
        assert len(await repos.preferences.list_for_user(user.id)) == 1

    async def test_upsert_overwrites_existing_values(self, repos, user):
        await repos.preferences.upsert(user.id, {"theme": "dark", "daily_goal_hours": 6})

        stored = await repos.preferences.upsert(user.id, {"theme": "light"})

        assert stored.theme == "light"
        assert stored.daily_goal_hours == 6


class TestUserPreferencesConcurrentUpsert:
    async def test_parallel_upserts_leave_one_row(self, file_engine):
        sessionmaker = create_sessionmaker(file_engine)
        async with sessionmaker() as session:
            await build_sql_repos_from_session(session=session).users.create(User(id="u1"))

        async def upsert(values):
            async with sessionmaker() as session:
                return await build_sql_repos_from_session(session=session).preferences.upsert("u1", values)

        results = await asyncio.gather(upsert({"theme": "dark"}), upsert({"pomodoro_duration": 50}))

        assert {preferences.user_id for preferences in results} == {"u1"}
        async with sessionmaker() as session:
            rows = await build_sql_repos_from_session(session=session).preferences.list_for_user("u1")
        assert len(rows) == 1
        assert rows[0].theme == "dark"
        assert rows[0].pomodoro_duration == 50
