"""Build-space and chat-create API integration tests (SSE over ASGITransport)."""

import json
import random

import pytest
from httpx import ASGITransport, AsyncClient

from spacegen.api.dependencies import get_build_space_use_case, get_chat_create_use_case
from spacegen.application.build_space.use_case import BuildSpaceUseCase
from spacegen.application.chat_create.use_case import ChatCreateUseCase
from spacegen.domain.ports.config import BuildConfig
from spacegen.domain.services.wallpaper_matcher import WallpaperMatcher
from spacegen.infrastructure.agents.content_builder import ContentBuilder
from spacegen.main import app


def _parse_sse(body: str) -> list[tuple[str, dict]]:
    """(event, data) pairs from a text/event-stream body."""
    frames = []
    for block in body.replace("\r\n", "\n").split("\n\n"):
        event, data = None, []
        for line in block.split("\n"):
            if line.startswith("event:"):
                event = line[len("event:"):].strip()
            elif line.startswith("data:"):
                data.append(line[len("data:"):].strip())
        if event:
            frames.append((event, json.loads("\n".join(data))))
    return frames


@pytest.fixture
def override_use_cases(scripted_gateway):
    builder = ContentBuilder(scripted_gateway)
    app.dependency_overrides[get_build_space_use_case] = lambda: BuildSpaceUseCase(
        gateway=scripted_gateway,
        content_builder=builder,
        matcher=WallpaperMatcher(rng=random.Random(3)),
        config=BuildConfig(event_pacing_seconds=0),
    )
    app.dependency_overrides[get_chat_create_use_case] = lambda: ChatCreateUseCase(scripted_gateway, builder)
    yield scripted_gateway
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_build_space_streams_full_sequence(override_use_cases):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        resp = await client.post("/ai/build-space", json={"prompt": "Wedding photographer in Austin who wants to book calls"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/event-stream")
    assert "\r\n" not in resp.text

    frames = _parse_sse(resp.text)
    names = [name for name, _ in frames if name != "thinking"]
    assert names[:6] == ["phase", "understanding", "wallpaper", "prompt_keywords", "phase", "plan"]
    assert names[-1] == "complete"
    assert len(frames[-1][1]["items"]) == 4


@pytest.mark.asyncio
async def test_build_space_short_prompt(override_use_cases):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        resp = await client.post("/ai/build-space", json={"prompt": "hi"})
    assert resp.status_code == 200
    assert _parse_sse(resp.text) == [("error", {"message": "Prompt too short"})]


@pytest.mark.asyncio
async def test_build_space_long_prompt_streams(override_use_cases):
    prompt = "Wedding photographer in Austin. " * 500
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        resp = await client.post("/ai/build-space", json={"prompt": prompt})
    assert resp.status_code == 200
    assert _parse_sse(resp.text)[-1][0] == "complete"


@pytest.mark.asyncio
async def test_chat_create_short_message_is_400(override_use_cases):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        resp = await client.post("/ai/chat-create", json={"message": " a "})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Message too short"}


@pytest.mark.asyncio
async def test_chat_create_streams_item(override_use_cases):
    override_use_cases.overrides["intent"] = json.dumps(
        {"type": "file", "fileType": "note", "title": "Pricing", "purpose": "Explain packages"}
    )
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        resp = await client.post("/ai/chat-create", json={"message": "write my pricing page"})
    frames = _parse_sse(resp.text)
    assert [name for name, _ in frames] == ["thinking", "thinking", "created", "complete"]
    assert frames[-1][1]["item"]["title"] == "Pricing"
