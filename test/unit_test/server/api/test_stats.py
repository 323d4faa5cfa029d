"""Tests for the dashboard stats endpoint."""

from datetime import datetime, timezone

from httpx import AsyncClient


class TestStatsEndpoint:
    async def test_empty_user(self, client: AsyncClient):
        response = await client.get("/api/stats")

        assert response.status_code == 200
        body = response.json()
        assert body["todayStudyTime"] == 0
        assert body["completedTasksToday"] == 0
        assert body["totalTasksToday"] == 0
        assert body["currentStreak"] == 0
        assert body["focusScore"] == 0
        assert [d["day"] for d in body["weeklyStudyTime"]] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        assert body["subjectProgress"] == []

    async def test_counts_today(self, client: AsyncClient):
        now = datetime.now(timezone.utc).isoformat()
        await client.post(
            "/api/study-sessions",
            json={"startTime": now, "duration": 45, "completed": True, "subject": "Physics"},
        )
        await client.post("/api/tasks", json={"title": "a", "status": "done", "subject": "Physics"})
        await client.post("/api/tasks", json={"title": "b"})
        await client.post("/api/subjects", json={"name": "Art"})

        body = (await client.get("/api/stats")).json()

        assert body["todayStudyTime"] == 45
        assert body["completedTasksToday"] == 1
        assert body["totalTasksToday"] == 2
        assert body["currentStreak"] == 1
        assert body["focusScore"] == 100
        assert sum(d["hours"] for d in body["weeklyStudyTime"]) == 0.8
        assert body["subjectProgress"] == [
            {"subject": "Physics", "hours": 0.8, "tasksCompleted": 1},
            {"subject": "Art", "hours": 0.0, "tasksCompleted": 0},
        ]
