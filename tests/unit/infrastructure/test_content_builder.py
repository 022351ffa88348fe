"""Tests for ContentBuilder dispatch and placeholders."""

import json
from unittest.mock import AsyncMock

import pytest

from spacegen.domain.entities.workspace import ItemType, PlanItem, UnderstandingProfile, WidgetType
from spacegen.domain.errors import AllProvidersFailedError, ProviderError
from spacegen.infrastructure.agents.content_builder import (
    CUSTOM_APP_PLACEHOLDER,
    MAX_TOKENS,
    ContentBuilder,
    clean_custom_app,
    strip_fences,
)
from spacegen.infrastructure.agents.prompts import WORD_TARGETS

PROFILE = UnderstandingProfile(summary="A baker", tone="warm")


def _item(item_type: ItemType, **kwargs) -> PlanItem:
    return PlanItem(type=item_type, name=kwargs.pop("name", "Sourdough Basics"), purpose="Teach", **kwargs)


def _gateway(response=None, error=None):
    gateway = AsyncMock()
    if error is not None:
        gateway.generate.side_effect = error
    else:
        gateway.generate.return_value = response
    return gateway


FAILED = AllProvidersFailedError([ProviderError("openrouter", 500), ProviderError("gemini", 500)])


class TestNoContentTypes:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "item",
        [
            PlanItem(type=ItemType.WIDGET, widget_type=WidgetType.BOOK, name="Book"),
            PlanItem(type=ItemType.FOLDER, name="Gallery"),
            PlanItem(type=ItemType.LINK, name="Site", link_url="https://x.dev"),
        ],
    )
    async def test_returns_empty_without_calling_gateway(self, item):
        gateway = _gateway("unused")
        assert await ContentBuilder(gateway).build(item, PROFILE) == ""
        gateway.generate.assert_not_awaited()


class TestHtmlContent:
    @pytest.mark.asyncio
    async def test_strips_fences(self):
        builder = ContentBuilder(_gateway("```html\n<h1>Hi</h1>\n```"))
        assert await builder.build(_item(ItemType.NOTE), PROFILE) == "<h1>Hi</h1>"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("item_type", [ItemType.NOTE, ItemType.CASE_STUDY, ItemType.EMBED])
    async def test_gateway_failure_uses_named_skeleton(self, item_type):
        content = await ContentBuilder(_gateway(error=FAILED)).build(_item(item_type, name="Bread & Co"), PROFILE)
        assert content.startswith("<h1>Bread &amp; Co</h1>")

    @pytest.mark.asyncio
    async def test_empty_after_cleanup_uses_skeleton(self):
        content = await ContentBuilder(_gateway("```html\n```")).build(_item(ItemType.NOTE), PROFILE)
        assert "<h1>Sourdough Basics</h1>" in content

    @pytest.mark.asyncio
    async def test_unexpected_error_still_returns_content(self):
        content = await ContentBuilder(_gateway(error=RuntimeError("bug"))).build(_item(ItemType.NOTE), PROFILE)
        assert content

    @pytest.mark.asyncio
    async def test_prompt_carries_word_band_and_tone(self):
        gateway = _gateway("<p>ok</p>")
        await ContentBuilder(gateway).build(_item(ItemType.CASE_STUDY), PROFILE)
        prompt, max_tokens = gateway.generate.await_args.args
        assert "250-400 words" in prompt
        assert "Match their tone (warm)" in prompt
        assert max_tokens == 2000


class TestStructuredContent:
    @pytest.mark.asyncio
    async def test_board_is_validated_json(self):
        raw = '```json\n{"columns": [{"title": "Orders", "cards": [{"title": "Rye"}]}]}\n```'
        gateway = _gateway(raw)
        content = await ContentBuilder(gateway).build(_item(ItemType.BOARD), PROFILE)
        data = json.loads(content)
        assert data["columns"][0]["id"] == "col-1"
        assert data["columns"][0]["cards"][0]["color"] == "blue"
        assert gateway.generate.await_args.args[1] == 4000

    @pytest.mark.asyncio
    async def test_board_failure_uses_skeleton(self):
        content = await ContentBuilder(_gateway("no json here")).build(_item(ItemType.BOARD), PROFILE)
        assert [c["title"] for c in json.loads(content)["columns"]] == ["To Do", "In Progress", "Done"]

    @pytest.mark.asyncio
    async def test_board_schema_failure_uses_skeleton(self):
        content = await ContentBuilder(_gateway('{"columns": []}')).build(_item(ItemType.BOARD), PROFILE)
        assert len(json.loads(content)["columns"]) == 3

    @pytest.mark.asyncio
    async def test_sheet_failure_uses_two_row_skeleton(self):
        content = await ContentBuilder(_gateway(error=FAILED)).build(_item(ItemType.SHEET), PROFILE)
        assert len(json.loads(content)["data"]) == 2

    @pytest.mark.asyncio
    async def test_sheet_success(self):
        raw = '{"data": [[{"value": "Loaf"}, {"value": "Price"}], [{"value": "Rye"}, {"value": 6, "type": "currency"}]]}'
        gateway = _gateway(raw)
        data = json.loads(await ContentBuilder(gateway).build(_item(ItemType.SHEET), PROFILE))
        assert data["data"][1][1] == {"value": "6", "type": "currency"}
        assert gateway.generate.await_args.args[1] == 6000


class TestCustomApp:
    def test_clean_removes_root_and_closes_script(self):
        raw = "```html\n<style>:root { --x: red; }\n.app { color: var(--color-text-primary); }</style>\n<div class=\"app\"></div>\n<script>\nconsole.log(1)\n```"
        cleaned = clean_custom_app(raw)
        assert ":root" not in cleaned
        assert "```" not in cleaned
        assert cleaned.endswith("</script>")
        assert ".app { color" in cleaned

    def test_closed_script_untouched(self):
        raw = "<div></div><script>go()</script>"
        assert clean_custom_app(raw) == raw

    def test_strip_fences_keeps_body(self):
        assert strip_fences("```\n<p>x</p>\n```") == "<p>x</p>"

    @pytest.mark.asyncio
    async def test_failure_uses_setup_panel(self):
        content = await ContentBuilder(_gateway(error=FAILED)).build(_item(ItemType.CUSTOM_APP), PROFILE)
        assert content == CUSTOM_APP_PLACEHOLDER
        assert "being set up" in content


class TestStaticTables:
    @pytest.mark.parametrize("table, key", [(MAX_TOKENS, ItemType.BOARD), (WORD_TARGETS, "note")])
    def test_tables_are_read_only(self, table, key):
        with pytest.raises(TypeError):
            table[key] = "changed"
