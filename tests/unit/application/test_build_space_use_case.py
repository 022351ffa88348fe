"""Tests for BuildSpaceUseCase (graph + event stream)."""

import asyncio
import json
import random

import pytest

from spacegen.application.build_space.dto import BuildSpaceRequest
from spacegen.application.build_space.use_case import BuildSpaceUseCase
from spacegen.domain.ports.config import BuildConfig
from spacegen.domain.services.wallpaper_matcher import WALLPAPER_CATALOG, WallpaperMatcher
from spacegen.infrastructure.agents.content_builder import ContentBuilder

FAST = BuildConfig(event_pacing_seconds=0, max_duration_seconds=30)
PROMPT = "Wedding photographer in Austin who wants to book calls"


def _use_case(gateway, config: BuildConfig = FAST) -> BuildSpaceUseCase:
    return BuildSpaceUseCase(
        gateway=gateway,
        content_builder=ContentBuilder(gateway),
        matcher=WallpaperMatcher(rng=random.Random(1)),
        config=config,
    )


async def _collect(use_case, prompt=PROMPT):
    return [e async for e in use_case.execute_stream(BuildSpaceRequest(prompt=prompt))]


def _names(events):
    return [e.event.value for e in events]


def _strip_thinking(names):
    return [n for n in names if n != "thinking"]


class TestValidation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("prompt", ["", "short", "  baker  "])
    async def test_short_prompt_only_error(self, prompt, scripted_gateway):
        events = await _collect(_use_case(scripted_gateway), prompt)
        assert _names(events) == ["error"]
        assert events[0].data == {"message": "Prompt too short"}
        assert scripted_gateway.calls == []

    @pytest.mark.asyncio
    async def test_length_counts_surrounding_whitespace(self, scripted_gateway):
        events = await _collect(_use_case(scripted_gateway), "  baker!  ")
        assert events[-1].event.value == "complete"
        # The model sees the stripped text
        assert scripted_gateway.prompts[0].count("  baker!  ") == 0
        assert "baker!" in scripted_gateway.prompts[0]

    @pytest.mark.asyncio
    async def test_long_prompt_is_accepted(self, scripted_gateway):
        events = await _collect(_use_case(scripted_gateway), "wedding photographer " * 800)
        assert events[-1].event.value == "complete"


class TestSuccessfulRun:
    @pytest.mark.asyncio
    async def test_event_sequence(self, scripted_gateway):
        events = await _collect(_use_case(scripted_gateway))
        names = _names(events)

        assert _strip_thinking(names) == [
            "phase", "understanding", "wallpaper", "prompt_keywords",
            "phase", "plan",
            "phase",
            "building", "created", "building", "created", "building", "created", "building", "created",
            "complete",
        ]
        # Each item is announced by thinking, then building, then created
        building_at = [i for i, n in enumerate(names) if n == "building"]
        assert all(names[i - 1] == "thinking" and names[i + 1] == "created" for i in building_at)
        phases = [e.data["phase"] for e in events if e.event.value == "phase"]
        assert phases == ["understanding", "planning", "building"]

    @pytest.mark.asyncio
    async def test_created_items_follow_plan_priority(self, scripted_gateway):
        events = await _collect(_use_case(scripted_gateway))
        plan = next(e for e in events if e.event.value == "plan").data
        created = [e.data for e in events if e.event.value == "created"]

        assert plan["itemCount"] == 4
        assert [i["name"] for i in plan["items"]] == [c["item"]["title"] for c in created]
        priorities = [c["item"]["priority"] for c in created]
        assert priorities == sorted(priorities)
        assert [c["remaining"] for c in created] == [3, 2, 1, 0]

    @pytest.mark.asyncio
    async def test_item_content_by_type(self, scripted_gateway):
        events = await _collect(_use_case(scripted_gateway))
        items = {e.data["item"]["title"]: e.data["item"] for e in events if e.event.value == "created"}

        book = items["Book a Consultation"]
        assert book["type"] == "widget"
        assert book["widgetType"] == "book"
        assert book["content"] == ""
        board = json.loads(items["Wedding Season"]["content"])
        assert board["columns"][0]["title"] == "Inquiries"
        assert items["Hill Country Elopement"]["content"].startswith("<h1>Generated</h1>")

    @pytest.mark.asyncio
    async def test_understanding_wallpaper_and_complete(self, scripted_gateway):
        events = await _collect(_use_case(scripted_gateway))
        by_name = {e.event.value: e.data for e in events}

        assert by_name["understanding"]["identity"]["profession"] == "wedding photographer"
        assert by_name["understanding"]["tone"] == "warm"
        wedding_urls = next(e.urls for e in WALLPAPER_CATALOG if e.name == "wedding")
        assert by_name["wallpaper"]["url"] in wedding_urls
        assert "wedding" in by_name["prompt_keywords"]["keywords"]
        assert by_name["prompt_keywords"]["interpretation"] == "wedding photographer focused on booking more couples"
        complete = by_name["complete"]
        assert len(complete["items"]) == 4
        assert complete["summary"] == "A warm wedding photography studio"
        assert complete["understanding"].startswith("A warm wedding photographer")
        assert events[-1].event.value == "complete"

    @pytest.mark.asyncio
    async def test_builds_items_one_at_a_time(self, scripted_gateway):
        await _collect(_use_case(scripted_gateway))
        kinds = [k for k, _ in scripted_gateway.calls]
        # widget needs no call; the rest run in priority order after planning
        assert kinds == ["understanding", "planning", "content", "content", "board"]


class TestDegradedRuns:
    @pytest.mark.asyncio
    async def test_understanding_failure_uses_fallback_workspace(self, make_gateway):
        gateway = make_gateway(fail_on=("understanding",))
        events = await _collect(_use_case(gateway), "Wedding photographer in Austin, capturing love stories")
        names = _strip_thinking(_names(events))

        assert names[:6] == ["phase", "understanding", "wallpaper", "prompt_keywords", "phase", "plan"]
        assert names[-1] == "complete"
        assert "error" not in names
        created = [e.data["item"] for e in events if e.event.value == "created"]
        assert created[1]["title"] == "Wedding Gallery"
        assert [c["widgetType"] for c in created if c["type"] == "widget"] == ["contact"]
        # Deterministic content only: no provider calls after the failed one
        assert [k for k, _ in gateway.calls] == ["understanding"]

    @pytest.mark.asyncio
    async def test_unparseable_understanding_uses_fallback(self, make_gateway):
        gateway = make_gateway(overrides={"understanding": "I'd love to help!"})
        events = await _collect(_use_case(gateway))
        understanding = next(e for e in events if e.event.value == "understanding").data
        assert understanding["summary"].startswith("I understand you're a photographer")
        assert events[-1].event.value == "complete"

    @pytest.mark.asyncio
    async def test_planning_failure_keeps_ai_content(self, make_gateway):
        gateway = make_gateway(overrides={"planning": "no plan, sorry"})
        events = await _collect(_use_case(gateway))

        plan = next(e for e in events if e.event.value == "plan").data
        assert plan["items"][0]["name"] == "About Me"
        assert plan["reasoning"] == "Using a recommended workspace layout"
        about = next(e.data["item"] for e in events if e.event.value == "created")
        assert about["content"].startswith("<h1>Generated</h1>")
        assert events[-1].event.value == "complete"

    @pytest.mark.asyncio
    async def test_gateway_down_during_planning_still_completes(self, make_gateway):
        gateway = make_gateway(fail_on=("planning", "content", "board"))
        events = await _collect(_use_case(gateway))
        assert events[-1].event.value == "complete"
        created = [e.data["item"] for e in events if e.event.value == "created"]
        assert all(c["content"] or c["type"] == "widget" or c["fileType"] == "folder" for c in created)


class TestFailureAndCancellation:
    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_single_error_event(self, scripted_gateway, monkeypatch):
        use_case = _use_case(scripted_gateway)

        def explode(*args, **kwargs):
            raise RuntimeError("matcher exploded")

        monkeypatch.setattr(use_case._matcher, "match", explode)
        events = await _collect(use_case)
        assert events[-1].event.value == "error"
        assert events[-1].data == {"message": "matcher exploded"}
        assert "complete" not in _names(events)

    @pytest.mark.asyncio
    async def test_timeout_emits_error_and_cancels(self):
        started = asyncio.Event()

        class HangingGateway:
            cancelled = False

            async def generate(self, prompt, max_tokens=2000):
                started.set()
                try:
                    await asyncio.sleep(60)
                except asyncio.CancelledError:
                    HangingGateway.cancelled = True
                    raise

        config = BuildConfig(event_pacing_seconds=0, max_duration_seconds=0.2)
        events = await _collect(_use_case(HangingGateway(), config))
        assert started.is_set()
        assert events[-1].event.value == "error"
        assert events[-1].data["message"] == "Workspace generation timed out"
        assert HangingGateway.cancelled

    @pytest.mark.asyncio
    async def test_consumer_leaving_early_cancels_pipeline(self):
        entered = asyncio.Event()
        cancelled = asyncio.Event()

        class BlockingGateway:
            async def generate(self, prompt, max_tokens=2000):
                entered.set()
                try:
                    await asyncio.sleep(60)
                except asyncio.CancelledError:
                    cancelled.set()
                    raise

        stream = _use_case(BlockingGateway()).execute_stream(BuildSpaceRequest(prompt=PROMPT))
        first = await anext(stream)
        assert first.event.value == "phase"
        await asyncio.wait_for(entered.wait(), timeout=5)
        await stream.aclose()
        assert cancelled.is_set()
