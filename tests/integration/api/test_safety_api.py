"""Integration tests for blocking and reporting."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


class TestBlockAPI:
    @pytest.mark.asyncio
    async def test_block_is_idempotent(self, api_client: AsyncClient, make_member) -> None:
        _, me = await make_member()
        other_id, _ = await make_member()

        first = await api_client.post("/api/v1/block", json={"blocked_id": other_id}, headers=me)
        second = await api_client.post("/api/v1/block", json={"blocked_id": other_id}, headers=me)

        assert first.status_code == 201
        assert second.json()["data"]["id"] == first.json()["data"]["id"]
        blocks = (await api_client.get("/api/v1/block", headers=me)).json()["data"]
        assert [b["blocked_id"] for b in blocks] == [other_id]

    @pytest.mark.asyncio
    async def test_block_hides_profile_and_match(
        self, api_client: AsyncClient, make_member
    ) -> None:
        alex_id, alex = await make_member()
        sam_id, sam = await make_member()
        await api_client.post("/api/v1/swipe", json={"swiped_id": sam_id, "action": "like"}, headers=alex)
        swipe = await api_client.post(
            "/api/v1/swipe", json={"swiped_id": alex_id, "action": "like"}, headers=sam
        )
        match_id = swipe.json()["match"]["id"]

        await api_client.post("/api/v1/block", json={"blocked_id": alex_id}, headers=sam)

        profile = await api_client.get(f"/api/v1/profiles/{sam_id}", headers=alex)
        matches = await api_client.get("/api/v1/matches", headers=alex)
        message = await api_client.post(
            "/api/v1/messages", json={"match_id": match_id, "content": "hi"}, headers=alex
        )

        assert profile.status_code == 404
        assert matches.json()["data"] == []
        assert message.status_code == 403
        assert message.json()["error_code"] == "BLOCKED"

    @pytest.mark.asyncio
    async def test_unblock(self, api_client: AsyncClient, make_member) -> None:
        _, me = await make_member()
        other_id, _ = await make_member(display_name="other")
        await api_client.post("/api/v1/block", json={"blocked_id": other_id}, headers=me)

        response = await api_client.delete(f"/api/v1/block/{other_id}", headers=me)
        again = await api_client.delete(f"/api/v1/block/{other_id}", headers=me)
        feed = await api_client.get("/api/v1/discovery", headers=me)

        assert response.status_code == 204
        assert again.status_code == 404
        assert [c["profile"]["display_name"] for c in feed.json()["data"]] == ["other"]

    @pytest.mark.asyncio
    async def test_cannot_block_self(self, api_client: AsyncClient, make_member) -> None:
        me_id, me = await make_member()

        response = await api_client.post("/api/v1/block", json={"blocked_id": me_id}, headers=me)

        assert response.status_code == 400
        assert response.json()["error_code"] == "SELF_ACTION"

    @pytest.mark.asyncio
    async def test_block_unknown_profile(self, api_client: AsyncClient, make_member) -> None:
        _, me = await make_member()

        response = await api_client.post(
            "/api/v1/block", json={"blocked_id": str(uuid4())}, headers=me
        )

        assert response.status_code == 404


class TestReportAPI:
    @pytest.mark.asyncio
    async def test_report_is_pending(self, api_client: AsyncClient, make_member) -> None:
        _, me = await make_member()
        other_id, _ = await make_member()

        response = await api_client.post(
            "/api/v1/report",
            json={"reported_id": other_id, "reason": "spam", "description": "links"},
            headers=me,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "pending"
        assert data["reason"] == "spam"

    @pytest.mark.asyncio
    async def test_cannot_report_self(self, api_client: AsyncClient, make_member) -> None:
        me_id, me = await make_member()

        response = await api_client.post(
            "/api/v1/report", json={"reported_id": me_id, "reason": "spam"}, headers=me
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_requires_token(self, api_client: AsyncClient) -> None:
        response = await api_client.post(
            "/api/v1/report", json={"reported_id": str(uuid4()), "reason": "spam"}
        )

        assert response.status_code == 401
