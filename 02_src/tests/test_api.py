"""Tests for the HTTP API."""

import httpx
import pytest_asyncio

from botcore.api.app import create_fastapi_app
from botcore.bot import Bot
from botcore.demo import SAMPLE_DIALOGS, SAMPLE_PATTERNS


@pytest_asyncio.fixture
async def bot(config):
    """Started bot; ASGITransport does not run the app lifespan."""
    b = Bot(config=config, dialogs=SAMPLE_DIALOGS, patterns=SAMPLE_PATTERNS)
    await b.start()
    yield b
    await b.stop()


@pytest_asyncio.fixture
async def client(bot):
    """HTTP client bound to the app."""
    app = create_fastapi_app(bot)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestMessagingRoutes:
    """Tests for /api/messages and /api/postbacks."""

    async def test_send_message(self, client):
        response = await client.post(
            "/api/messages", json={"user_id": "user1", "text": "hello"}
        )

        assert response.status_code == 200
        messages = response.json()["messages"]
        assert messages == [
            {
                "type": "text",
                "bot": "test",
                "user": "user1",
                "payload": {"value": "Hello! How can I help you?", "options": {}},
            }
        ]

    async def test_send_message_requires_text(self, client):
        response = await client.post("/api/messages", json={"user_id": "user1"})

        assert response.status_code == 422

    async def test_send_postback(self, client):
        response = await client.post(
            "/api/postbacks", json={"user_id": "user1", "dialog": "thanks"}
        )

        assert response.status_code == 200
        assert response.json()["messages"][0]["payload"]["value"] == "You're welcome."

    async def test_postback_with_entities(self, client):
        response = await client.post(
            "/api/postbacks",
            json={
                "user_id": "user1",
                "dialog": "book_table",
                "entities": [
                    {"dim": "number", "value": 3},
                    {"dim": "time", "value": "12:15"},
                ],
            },
        )

        assert response.status_code == 200
        values = [m["payload"]["value"] for m in response.json()["messages"]]
        assert values == ["Table booked for 3 at 12:15."]

    async def test_unknown_dialog_returns_500(self, client):
        response = await client.post(
            "/api/postbacks", json={"user_id": "user1", "dialog": "ghost"}
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Dialog not configured: ghost"


class TestDialogsRoute:
    """Tests for /api/users/{user_id}/dialogs."""

    async def test_get_dialogs_of_waiting_user(self, client):
        await client.post(
            "/api/messages", json={"user_id": "user1", "text": "book a table"}
        )

        response = await client.get("/api/users/user1/dialogs")

        assert response.status_code == 200
        body = response.json()
        assert body["user_id"] == "user1"
        assert [d["label"] for d in body["dialogs"]] == ["book_table"]
        assert body["last_dialog"]["label"] == "book_table"

    async def test_get_dialogs_unknown_user(self, client):
        response = await client.get("/api/users/nobody/dialogs")

        assert response.status_code == 404


class TestObservabilityRoute:
    """Tests for /api/trace-events."""

    async def test_get_trace_events(self, client):
        await client.post("/api/messages", json={"user_id": "user1", "text": "hi"})

        response = await client.get("/api/trace-events")

        assert response.status_code == 200
        event_types = [e["event_type"] for e in response.json()]
        assert "message_received" in event_types
        assert "dialog_executed" in event_types

    async def test_filter_by_event_type(self, client):
        await client.post("/api/messages", json={"user_id": "user1", "text": "hi"})

        response = await client.get(
            "/api/trace-events", params={"event_type": "message_received"}
        )

        events = response.json()
        assert len(events) == 1
        assert events[0]["data"]["message_text"] == "hi"

    async def test_invalid_after_returns_400(self, client):
        response = await client.get("/api/trace-events", params={"after": "yesterday"})

        assert response.status_code == 400


class TestControlRoute:
    """Tests for /api/control/reset."""

    async def test_reset(self, client, bot):
        await client.post("/api/messages", json={"user_id": "user1", "text": "hi"})

        response = await client.post("/api/control/reset")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert not await bot.brain.has_user("user1")
