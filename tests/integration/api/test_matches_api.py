"""Integration tests for matches and messaging."""

import pytest
from httpx import AsyncClient


@pytest.fixture
async def matched(api_client: AsyncClient, make_member):
    """Two members who liked each other. Returns (match_id, alex, sam)."""
    alex_id, alex = await make_member(display_name="Alex")
    sam_id, sam = await make_member(display_name="Sam")
    await api_client.post("/api/v1/swipe", json={"swiped_id": sam_id, "action": "like"}, headers=alex)
    response = await api_client.post(
        "/api/v1/swipe", json={"swiped_id": alex_id, "action": "like"}, headers=sam
    )
    return response.json()["match"]["id"], alex, sam


async def _send(client: AsyncClient, headers: dict, match_id: str, content: str):
    return await client.post(
        "/api/v1/messages", json={"match_id": match_id, "content": content}, headers=headers
    )


class TestMatchesAPI:
    @pytest.mark.asyncio
    async def test_list_shows_counterpart(self, api_client: AsyncClient, matched) -> None:
        match_id, alex, sam = matched

        alex_view = (await api_client.get("/api/v1/matches", headers=alex)).json()["data"]
        sam_view = (await api_client.get("/api/v1/matches", headers=sam)).json()["data"]

        assert [m["id"] for m in alex_view] == [match_id]
        assert alex_view[0]["counterpart"]["display_name"] == "Sam"
        assert sam_view[0]["counterpart"]["display_name"] == "Alex"
        assert alex_view[0]["unread_count"] == 0

    @pytest.mark.asyncio
    async def test_outsider_cannot_see_match(
        self, api_client: AsyncClient, matched, make_member
    ) -> None:
        match_id, _, _ = matched
        _, outsider = await make_member()

        detail = await api_client.get(f"/api/v1/matches/{match_id}", headers=outsider)
        messages = await api_client.get(f"/api/v1/messages/{match_id}", headers=outsider)

        assert detail.status_code == 404
        assert messages.status_code == 404

    @pytest.mark.asyncio
    async def test_unmatch_removes_conversation(self, api_client: AsyncClient, matched) -> None:
        match_id, alex, sam = matched
        await _send(api_client, alex, match_id, "hello")

        response = await api_client.delete(f"/api/v1/matches/{match_id}", headers=sam)

        assert response.status_code == 204
        assert (await api_client.get("/api/v1/matches", headers=alex)).json()["data"] == []
        gone = await api_client.get(f"/api/v1/messages/{match_id}", headers=alex)
        assert gone.status_code == 404


class TestMessagesAPI:
    @pytest.mark.asyncio
    async def test_conversation_round_trip(self, api_client: AsyncClient, matched) -> None:
        match_id, alex, sam = matched

        sent = await _send(api_client, alex, match_id, "  hi Sam  ")
        await _send(api_client, alex, match_id, "are you there?")

        assert sent.status_code == 201
        assert sent.json()["data"]["content"] == "hi Sam"
        assert sent.json()["data"]["is_read"] is False

        listing = (await api_client.get("/api/v1/matches", headers=sam)).json()["data"]
        assert listing[0]["unread_count"] == 2
        assert listing[0]["last_message_at"] is not None

        conversation = await api_client.get(f"/api/v1/messages/{match_id}", headers=sam)
        assert [m["content"] for m in conversation.json()["data"]] == ["hi Sam", "are you there?"]

        listing = (await api_client.get("/api/v1/matches", headers=sam)).json()["data"]
        assert listing[0]["unread_count"] == 0

    @pytest.mark.asyncio
    async def test_peek_without_marking_read(self, api_client: AsyncClient, matched) -> None:
        match_id, alex, sam = matched
        await _send(api_client, alex, match_id, "hi")

        await api_client.get(
            f"/api/v1/messages/{match_id}", params={"mark_read": False}, headers=sam
        )
        response = await api_client.post(f"/api/v1/messages/{match_id}/read", headers=sam)

        assert response.json()["data"]["updated"] == 1

    @pytest.mark.asyncio
    async def test_own_messages_stay_unread_for_counterpart(
        self, api_client: AsyncClient, matched
    ) -> None:
        match_id, alex, _ = matched
        await _send(api_client, alex, match_id, "hi")

        response = await api_client.post(f"/api/v1/messages/{match_id}/read", headers=alex)

        assert response.json()["data"]["updated"] == 0

    @pytest.mark.asyncio
    async def test_blank_message_rejected(self, api_client: AsyncClient, matched) -> None:
        match_id, alex, _ = matched

        response = await _send(api_client, alex, match_id, "   ")

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_MESSAGE"

    @pytest.mark.asyncio
    async def test_oversized_message_rejected(self, api_client: AsyncClient, matched) -> None:
        match_id, alex, _ = matched

        ok = await _send(api_client, alex, match_id, "x" * 2000)
        too_long = await _send(api_client, alex, match_id, "x" * 2001)

        assert ok.status_code == 201
        assert too_long.status_code == 400
