"""Content builder - produce the content string for one planned item.

build() never raises: every failure resolves to a typed placeholder so one
item cannot abort the batch.
"""

import html
import logging
import re
from types import MappingProxyType

from pydantic import ValidationError as SchemaError

from spacegen.domain.entities.structured_content import (
    BoardContent,
    SheetContent,
    skeleton_board,
    skeleton_sheet,
)
from spacegen.domain.entities.workspace import ItemType, PlanItem, UnderstandingProfile
from spacegen.domain.errors import AllProvidersFailedError, ExtractionError
from spacegen.domain.ports.llm import GatewayPort
from spacegen.infrastructure.agents.prompts import (
    build_board_prompt,
    build_content_prompt,
    build_custom_app_prompt,
    build_sheet_prompt,
)
from spacegen.infrastructure.llm.json_extractor import extract_json

logger = logging.getLogger(__name__)

NO_CONTENT_TYPES = frozenset({ItemType.WIDGET, ItemType.FOLDER, ItemType.LINK})

MAX_TOKENS = MappingProxyType(
    {
        ItemType.BOARD: 4000,
        ItemType.SHEET: 6000,
        ItemType.CUSTOM_APP: 6000,
    }
)
DEFAULT_MAX_TOKENS = 2000

_FENCE_RE = re.compile(r"```[\w-]*[ \t]*\n?")
_ROOT_BLOCK_RE = re.compile(r":root\s*\{[^}]*\}\s*", re.IGNORECASE)

CUSTOM_APP_PLACEHOLDER = """<style>
.app-setup { padding: 24px; text-align: center; font-family: var(--font-body); color: var(--color-text-secondary); }
.app-setup h2 { color: var(--color-text-primary); margin-bottom: 8px; }
</style>
<div class="app-setup">
  <h2>This tool is being set up</h2>
  <p>Check back soon.</p>
</div>"""


def strip_fences(text: str) -> str:
    """Remove markdown code fences, keeping what they wrapped."""
    return _FENCE_RE.sub("", text or "").strip()


def clean_custom_app(text: str) -> str:
    """Strip fences and any :root block; close a dangling <script>."""
    cleaned = _ROOT_BLOCK_RE.sub("", strip_fences(text))
    lowered = cleaned.lower()
    if lowered.rfind("<script") > lowered.rfind("</script>"):
        cleaned += "\n</script>"
    return cleaned


def placeholder_html(name: str) -> str:
    return f"<h1>{html.escape(name)}</h1>\n<p>Add your content here to personalize this section.</p>"


class ContentBuilder:
    """Dispatch content generation by item type."""

    def __init__(self, gateway: GatewayPort) -> None:
        self._gateway = gateway

    async def build(self, item: PlanItem, profile: UnderstandingProfile) -> str:
        if item.type in NO_CONTENT_TYPES:
            return ""
        max_tokens = MAX_TOKENS.get(item.type, DEFAULT_MAX_TOKENS)
        try:
            if item.type is ItemType.BOARD:
                raw = await self._gateway.generate(build_board_prompt(item), max_tokens)
                return BoardContent.model_validate(extract_json(raw)).to_json()
            if item.type is ItemType.SHEET:
                raw = await self._gateway.generate(build_sheet_prompt(item), max_tokens)
                return SheetContent.model_validate(extract_json(raw)).to_json()
            if item.type is ItemType.CUSTOM_APP:
                raw = await self._gateway.generate(build_custom_app_prompt(item, profile), max_tokens)
                content = clean_custom_app(raw)
            else:
                raw = await self._gateway.generate(build_content_prompt(item, profile), max_tokens)
                content = strip_fences(raw)
            if not content:
                raise ExtractionError("Empty content after cleanup")
            return content
        except (AllProvidersFailedError, ExtractionError, SchemaError) as e:
            logger.warning("Content generation failed for %s (%s): %s", item.name, item.type.value, e)
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error building content for %s", item.name)
        return self.placeholder(item)

    @staticmethod
    def placeholder(item: PlanItem) -> str:
        """Typed stand-in content for a failed item."""
        if item.type in NO_CONTENT_TYPES:
            return ""
        if item.type is ItemType.BOARD:
            return skeleton_board().to_json()
        if item.type is ItemType.SHEET:
            return skeleton_sheet().to_json()
        if item.type is ItemType.CUSTOM_APP:
            return CUSTOM_APP_PLACEHOLDER
        return placeholder_html(item.name)
