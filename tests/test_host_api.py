"""Host endpoints over FastAPI's TestClient."""
import pytest
from fastapi.testclient import TestClient

from vibe_cherry.common.models import StreamEvent
from vibe_cherry.core.fallback_templates import FIXED_APP
from vibe_cherry.host.api import create_app, format_sse


@pytest.fixture
def client(core_app):
    with TestClient(create_app(core_app)) as test_client:
        yield test_client


def test_health_reports_readiness(client):
    assert client.get("/health").json() == {"ok": True, "ready": False}

    client.post("/v1/initialize")

    assert client.get("/health").json() == {"ok": True, "ready": True}


def test_generate_before_initialize_is_conflict(client):
    response = client.post("/v1/generate", json={"text": "build me a todo app"})

    assert response.status_code == 409
    assert response.json()["detail"] == "Model not initialized"


def test_initialize_reports_availability(client, fake_runtime):
    fake_runtime.listing_error = FileNotFoundError(2, "No such file or directory")

    body = client.post("/v1/initialize").json()

    assert body["availability"] == "absent"
    assert body["real_inference"] is False
    assert "mock mode" in body["message"]


def test_generate_returns_artifact_and_publishes(client, core_app):
    subscription = core_app.channel.subscribe()
    client.post("/v1/initialize")

    response = client.post(
        "/v1/generate",
        json={"text": "build me a todo app", "history": [{"role": "user", "content": "hi"}]},
    )

    assert response.status_code == 200
    artifact = response.json()["artifact"]
    assert "Todo List" in artifact
    assert subscription.queue.qsize() == 1
    assert subscription.queue.get_nowait().text == artifact


def test_generate_with_healing(client):
    client.post("/v1/initialize")

    response = client.post(
        "/v1/generate/healing",
        json={"text": "x", "is_fix_attempt": True, "attempt_number": 2},
    )

    assert response.json()["artifact"] == FIXED_APP


def test_healing_rejects_attempt_below_one(client):
    response = client.post(
        "/v1/generate/healing",
        json={"text": "x", "is_fix_attempt": True, "attempt_number": 0},
    )

    assert response.status_code == 422


def test_stop(client, fake_runtime):
    response = client.post("/v1/stop")

    assert response.json() == {"message": "Generation stopped"}
    assert fake_runtime.terminated == 1


def test_format_sse():
    frame = format_sse(StreamEvent(text="hello"))

    assert frame.startswith("event: vibe-token\ndata: {")
    assert '"text":"hello"' in frame
    assert frame.endswith("\n\n")


async def test_events_route_streams_published_tokens(core_app):
    app = create_app(core_app)
    endpoint = next(route.endpoint for route in app.routes if getattr(route, "path", None) == "/v1/events")

    response = await endpoint()
    assert response.media_type == "text/event-stream"
    assert core_app.channel.subscriber_count == 1

    await core_app.initialize()
    artifact = await core_app.generate("build me a todo app")
    core_app.channel.close()
    frames = [frame async for frame in response.body_iterator]

    assert len(frames) == 1
    assert frames[0].startswith("event: vibe-token\ndata: ")
    assert StreamEvent.model_validate_json(frames[0].split("data: ", 1)[1]).text == artifact
    assert core_app.channel.subscriber_count == 0
