"""Tests for study session endpoints."""

from httpx import AsyncClient


class TestCreateStudySession:
    async def test_start_session(self, client: AsyncClient):
        response = await client.post("/api/study-sessions", json={"type": "pomodoro", "plannedDuration": 25})

        assert response.status_code == 201
        body = response.json()
        assert body["type"] == "pomodoro"
        assert body["duration"] == 0
        assert body["completed"] is False
        assert body["endTime"] is None
        assert body["startTime"].endswith("Z")

    async def test_record_finished_session_derives_duration(self, client: AsyncClient):
        response = await client.post(
            "/api/study-sessions",
            json={"startTime": "2024-05-06T09:00:00Z", "endTime": "2024-05-06T09:50:40Z", "completed": True},
        )

        assert response.json()["duration"] == 50

    async def test_end_before_start_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/study-sessions",
            json={"startTime": "2024-05-06T09:00:00Z", "endTime": "2024-05-06T08:00:00Z"},
        )

        assert response.status_code == 400
        assert "before it starts" in response.json()["detail"]

    async def test_break_type(self, client: AsyncClient):
        response = await client.post("/api/study-sessions", json={"type": "break"})

        assert response.json()["type"] == "break"


class TestUpdateStudySession:
    async def test_stop_session_derives_duration(self, client: AsyncClient):
        created = await client.post("/api/study-sessions", json={"startTime": "2024-05-06T09:00:00Z"})
        session_id = created.json()["id"]

        response = await client.patch(
            f"/api/study-sessions/{session_id}", json={"endTime": "2024-05-06T09:25:00Z", "completed": True}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["duration"] == 25
        assert body["completed"] is True

    async def test_explicit_duration_kept(self, client: AsyncClient):
        created = await client.post("/api/study-sessions", json={"startTime": "2024-05-06T09:00:00Z"})

        response = await client.put(
            f"/api/study-sessions/{created.json()['id']}", json={"endTime": "2024-05-06T10:00:00Z", "duration": 45}
        )

        assert response.json()["duration"] == 45

    async def test_end_before_start_rejected(self, client: AsyncClient):
        created = await client.post("/api/study-sessions", json={"startTime": "2024-05-06T09:00:00Z"})

        response = await client.patch(
            f"/api/study-sessions/{created.json()['id']}", json={"endTime": "2024-05-06T08:59:00Z"}
        )

        assert response.status_code == 400

    async def test_update_missing(self, client: AsyncClient):
        response = await client.patch("/api/study-sessions/missing", json={"completed": True})

        assert response.status_code == 404


class TestListStudySessions:
    async def _seed(self, client: AsyncClient):
        for day in (6, 7, 8):
            await client.post("/api/study-sessions", json={"startTime": f"2024-05-0{day}T09:00:00Z", "duration": 30})

    async def test_newest_first(self, client: AsyncClient):
        await self._seed(client)

        starts = [s["startTime"] for s in (await client.get("/api/study-sessions")).json()]

        assert starts == ["2024-05-08T09:00:00Z", "2024-05-07T09:00:00Z", "2024-05-06T09:00:00Z"]

    async def test_date_range_inclusive(self, client: AsyncClient):
        await self._seed(client)

        response = await client.get(
            "/api/study-sessions",
            params={"startDate": "2024-05-07T09:00:00Z", "endDate": "2024-05-08T09:00:00Z"},
        )

        assert len(response.json()) == 2

    async def test_start_date_only(self, client: AsyncClient):
        await self._seed(client)

        response = await client.get("/api/study-sessions", params={"startDate": "2024-05-08T00:00:00Z"})

        assert len(response.json()) == 1

    async def test_end_date_only(self, client: AsyncClient):
        await self._seed(client)

        response = await client.get("/api/study-sessions", params={"endDate": "2024-05-07T23:59:59Z"})

        assert len(response.json()) == 2


class TestActiveStudySession:
    async def test_none_active_returns_null(self, client: AsyncClient):
        response = await client.get("/api/study-sessions/active")

        assert response.status_code == 200
        assert response.json() is None

    async def test_open_session_is_active(self, client: AsyncClient):
        session_id = (await client.post("/api/study-sessions", json={"type": "study"})).json()["id"]

        response = await client.get("/api/study-sessions/active")

        assert response.json()["id"] == session_id

    async def test_client_session_path(self, client: AsyncClient):
        session_id = (await client.post("/api/sessions", json={"type": "pomodoro"})).json()["id"]
        await client.patch(f"/api/sessions/{session_id}", json={"completed": True, "endTime": "2099-01-01T00:00:00Z"})

        assert (await client.get("/api/sessions/active")).json() is None
