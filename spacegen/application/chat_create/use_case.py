"""Chat-create use case - one item from one chat message."""

from collections.abc import AsyncIterator

import structlog

from spacegen.application.chat_create.dto import ChatCreateRequest, intent_to_plan_item
from spacegen.domain.entities.generation_events import GenerationEvent, GenerationEventType
from spacegen.domain.entities.workspace import UnderstandingProfile, WorkspaceItem
from spacegen.domain.errors import AllProvidersFailedError, ExtractionError
from spacegen.domain.ports.llm import GatewayPort
from spacegen.infrastructure.agents.content_builder import ContentBuilder
from spacegen.infrastructure.agents.prompts import build_chat_intent_prompt
from spacegen.infrastructure.llm.json_extractor import extract_json

log = structlog.get_logger()

INTENT_MAX_TOKENS = 2000


def _event(event: GenerationEventType, **data) -> GenerationEvent:
    return GenerationEvent(event=event, data=data)


class ChatCreateUseCase:
    """thinking → intent → thinking → content → created → complete."""

    def __init__(self, gateway: GatewayPort, content_builder: ContentBuilder) -> None:
        self._gateway = gateway
        self._content_builder = content_builder

    async def execute_stream(self, request: ChatCreateRequest) -> AsyncIterator[GenerationEvent]:
        """Yield events. Intent failures end the stream with a single error event."""
        yield _event(GenerationEventType.THINKING, text="Understanding your request...")
        try:
            raw = await self._gateway.generate(build_chat_intent_prompt(request.message.strip()), INTENT_MAX_TOKENS)
            item = intent_to_plan_item(extract_json(raw))
        except (AllProvidersFailedError, ExtractionError) as e:
            log.warning("chat_create_intent_failed", error=str(e))
            yield _event(GenerationEventType.ERROR, message=str(e) or "Something went wrong")
            return

        yield _event(GenerationEventType.THINKING, text=f"Creating {item.name}...")
        profile = UnderstandingProfile(summary=item.purpose)
        content = await self._content_builder.build(item, profile)
        created = WorkspaceItem.from_plan_item(item, content).to_wire()
        log.info("chat_create_item", type=item.type.value, title=item.name)

        yield _event(GenerationEventType.CREATED, item=created, remaining=0)
        yield _event(GenerationEventType.COMPLETE, item=created, summary=item.purpose)
