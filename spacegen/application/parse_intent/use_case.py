"""Parse-intent use case - model-read intent with a keyword-template fallback."""

import structlog
from pydantic import ValidationError as SchemaError

from spacegen.application.parse_intent.dto import ParseIntentRequest
from spacegen.domain.entities.intent import ParsedIntent
from spacegen.domain.errors import AllProvidersFailedError, ExtractionError
from spacegen.domain.ports.llm import GatewayPort
from spacegen.domain.services.intent_templates import fallback_intent
from spacegen.infrastructure.agents.prompts import build_onboarding_intent_prompt
from spacegen.infrastructure.llm.json_extractor import extract_json

log = structlog.get_logger()

INTENT_MAX_TOKENS = 1000


class ParseIntentUseCase:
    def __init__(self, gateway: GatewayPort) -> None:
        self._gateway = gateway

    async def execute(self, request: ParseIntentRequest) -> ParsedIntent:
        """Validated intent. Raises ValidationError for a bad prompt, never for model failures."""
        prompt = request.validated_prompt()
        try:
            raw = await self._gateway.generate(build_onboarding_intent_prompt(prompt), INTENT_MAX_TOKENS)
            intent = ParsedIntent.model_validate(extract_json(raw))
        except (AllProvidersFailedError, ExtractionError, SchemaError) as e:
            log.warning("parse_intent_fallback", error_type=type(e).__name__, error=str(e))
            return fallback_intent(prompt)
        log.info("parse_intent_done", template=intent.base_template, notes=len(intent.notes))
        return intent
