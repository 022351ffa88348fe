"""Tests for the build graph wiring."""

import asyncio
import random

import pytest

from spacegen.domain.services.wallpaper_matcher import WallpaperMatcher
from spacegen.infrastructure.agents.content_builder import ContentBuilder
from spacegen.infrastructure.workflow import EventEmitter, build_space_graph, compile_space_graph


def _compiled(gateway):
    queue = asyncio.Queue()
    builder = build_space_graph(
        gateway,
        ContentBuilder(gateway),
        WallpaperMatcher(rng=random.Random(0)),
        EventEmitter(queue.put_nowait),
    )
    return compile_space_graph(builder), queue


def test_graph_nodes_and_no_checkpointer(scripted_gateway):
    graph, _ = _compiled(scripted_gateway)
    assert graph.checkpointer is None
    nodes = set(graph.get_graph().nodes)
    assert {"understanding", "fallback", "planning", "building", "complete"} <= nodes


@pytest.mark.asyncio
async def test_invoke_without_thread_id(scripted_gateway):
    graph, queue = _compiled(scripted_gateway)
    final = await graph.ainvoke({"prompt": "Wedding photographer in Austin", "used_fallback": False})
    assert len(final["items"]) == 4
    assert final["used_fallback"] is False
    assert queue.qsize() > 0
