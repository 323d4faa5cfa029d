"""Unit tests for the user repository."""

from __future__ import annotations

from unitracker.core.database.entities.users import User


class TestUserRepository:
    async def test_upsert_inserts_then_overwrites(self, repos):
        created = await repos.users.upsert("demo", {"email": "demo@example.com", "first_name": "Demo"})
        assert created.first_name == "Demo"

        updated = await repos.users.upsert("demo", {"first_name": "Dee"})

        assert updated.id == "demo"
        assert updated.first_name == "Dee"
        assert updated.email == "demo@example.com"
        assert updated.updated_at >= created.created_at

    async def test_update_profile_only_touches_profile_fields(self, repos, user):
        updated = await repos.users.update_profile(
            user.id, {"major": "Physics", "hobbies": "Chess", "email": "hacker@example.com"}
        )

        assert updated.major == "Physics"
        assert updated.hobbies == "Chess"
        assert updated.email == "user1@example.com"

    async def test_update_profile_missing_user(self, repos):
        assert await repos.users.update_profile("nobody", {"major": "Art"}) is None

    async def test_clear_profile_details(self, repos, user, in_memory_session):
        await repos.users.update_profile(user.id, {"major": "Physics", "hobbies": "Chess"})

        assert await repos.users.clear_profile_details(user.id) is True
        await in_memory_session.commit()

        fetched = await repos.users.get_by_id(user.id)
        assert fetched.major is None
        assert fetched.hobbies is None
        assert fetched.first_name == "Ada"

    async def test_clear_profile_details_missing_user(self, repos):
        assert await repos.users.clear_profile_details("nobody") is False

    async def test_list_and_delete(self, repos, user, other_user):
        assert {u.id for u in await repos.users.list()} == {user.id, other_user.id}
        assert await repos.users.delete(other_user.id) is True
        assert await repos.users.delete(other_user.id) is False

    async def test_get_or_create_inserts_once(self, repos):
        created, inserted = await repos.users.get_or_create(User(id="demo", first_name="Demo"))
        assert inserted is True
        assert created.first_name == "Demo"

        again, inserted = await repos.users.get_or_create(User(id="demo", first_name="Other"))

        assert inserted is False
        assert again.first_name == "Demo"
        assert len(await repos.users.list()) == 1
