"""Tests for the stubbed authentication and profile endpoints."""

from httpx import AsyncClient

from unitracker.server.core.config import settings


class TestAuth:
    async def test_login_redirects_home(self, client: AsyncClient):
        response = await client.get("/api/login", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/"

    async def test_logout_redirects_home(self, client: AsyncClient):
        response = await client.get("/api/logout", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "/"

    async def test_current_user_is_demo_user(self, client: AsyncClient):
        response = await client.get("/api/auth/user")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == settings.demo_user_id
        assert body["email"] == settings.demo_user_email
        assert body["firstName"] == "Demo"
        assert body["lastName"] == "User"
        assert body["createdAt"].endswith("Z")

    async def test_current_user_is_created_once(self, client: AsyncClient):
        first = (await client.get("/api/auth/user")).json()
        second = (await client.get("/api/auth/user")).json()

        assert first["id"] == second["id"]
        assert first["createdAt"] == second["createdAt"]


class TestProfile:
    async def test_update_profile(self, client: AsyncClient):
        response = await client.put("/api/profile", json={"major": "Physics", "hobbies": "Chess, climbing"})

        assert response.status_code == 200
        body = response.json()
        assert body["major"] == "Physics"
        assert body["hobbies"] == "Chess, climbing"

    async def test_profile_edit_survives_next_request(self, client: AsyncClient):
        await client.patch("/api/profile", json={"firstName": "Ada"})

        assert (await client.get("/api/auth/user")).json()["firstName"] == "Ada"

    async def test_email_cannot_be_changed(self, client: AsyncClient):
        response = await client.put("/api/profile", json={"email": "new@example.com", "major": "Art"})

        assert response.status_code == 200
        assert response.json()["email"] == settings.demo_user_email
