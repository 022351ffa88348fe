"""Understanding agent - turn the raw prompt into an UnderstandingProfile."""

from spacegen.domain.entities.workspace import UnderstandingProfile
from spacegen.domain.ports.llm import GatewayPort
from spacegen.infrastructure.agents.prompts import build_understanding_prompt
from spacegen.infrastructure.llm.json_extractor import extract_json

UNDERSTANDING_MAX_TOKENS = 2000


async def understand(gateway: GatewayPort, prompt: str) -> UnderstandingProfile:
    """Raises AllProvidersFailedError or ExtractionError; the graph routes both to fallback."""
    raw = await gateway.generate(build_understanding_prompt(prompt), UNDERSTANDING_MAX_TOKENS)
    profile = UnderstandingProfile.from_model_output(extract_json(raw))
    if not profile.wallpaper_keyword:
        profile = profile.model_copy(
            update={"wallpaper_keyword": profile.identity.niche or profile.identity.profession}
        )
    return profile
