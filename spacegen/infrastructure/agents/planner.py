"""Planner agent - design the workspace Plan from a profile."""

from spacegen.domain.entities.workspace import Plan, UnderstandingProfile
from spacegen.domain.ports.llm import GatewayPort
from spacegen.infrastructure.agents.prompts import build_planning_prompt
from spacegen.infrastructure.llm.json_extractor import extract_json

PLANNING_MAX_TOKENS = 3000


async def plan_workspace(gateway: GatewayPort, profile: UnderstandingProfile) -> Plan:
    """Raises AllProvidersFailedError or ExtractionError."""
    raw = await gateway.generate(build_planning_prompt(profile), PLANNING_MAX_TOKENS)
    return Plan.from_model_output(extract_json(raw))
