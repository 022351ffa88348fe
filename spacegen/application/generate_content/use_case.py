"""Generate-content use case - HTML per note title, template content on failure."""

import structlog

from spacegen.application.generate_content.dto import GenerateContentRequest
from spacegen.domain.entities.intent import WRITTEN_NOTE_TYPES
from spacegen.domain.errors import AllProvidersFailedError, ExtractionError
from spacegen.domain.ports.llm import GatewayPort
from spacegen.domain.services.intent_templates import fallback_content, placeholder_note
from spacegen.infrastructure.agents.prompts import build_note_contents_prompt
from spacegen.infrastructure.llm.json_extractor import extract_json

log = structlog.get_logger()

CONTENT_MAX_TOKENS = 2000


class GenerateContentUseCase:
    """Fills a title -> HTML map for every note in the intent."""

    def __init__(self, gateway: GatewayPort) -> None:
        self._gateway = gateway

    async def execute(self, request: GenerateContentRequest) -> dict[str, str]:
        intent = request.intent
        written = [(n.title, n.type) for n in intent.notes if n.type in WRITTEN_NOTE_TYPES]
        prompt = build_note_contents_prompt(intent.user_type, intent.tone, request.user_prompt, written)
        try:
            raw = extract_json(await self._gateway.generate(prompt, CONTENT_MAX_TOKENS))
        except (AllProvidersFailedError, ExtractionError) as e:
            log.warning("generate_content_fallback", error=str(e))
            return fallback_content(intent)

        # Non-string values are dropped; every note still gets an entry
        content = {title: html for title, html in raw.items() if isinstance(html, str) and html.strip()}
        for note in intent.notes:
            if note.title not in content:
                content[note.title] = placeholder_note(note.title)
        log.info("generate_content_done", notes=len(intent.notes), generated=len(raw))
        return content
