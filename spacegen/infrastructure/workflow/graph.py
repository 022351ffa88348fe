"""LangGraph build pipeline - understanding → planning → building → complete.

Understanding failure routes to `fallback`, which supplies a deterministic
profile, plan and per-item content, then rejoins at `building`.
"""

import logging
from typing import Literal

from langgraph.graph import END, START, StateGraph

from spacegen.domain.entities.build_state import BuildState
from spacegen.domain.entities.generation_events import GenerationEventType, Phase
from spacegen.domain.entities.workspace import Plan, UnderstandingProfile, WorkspaceItem
from spacegen.domain.errors import AllProvidersFailedError, ExtractionError
from spacegen.domain.ports.llm import GatewayPort
from spacegen.domain.services.fallback_workspace import build_fallback_workspace
from spacegen.domain.services.prompt_keywords import build_prompt_keywords
from spacegen.domain.services.wallpaper_matcher import WallpaperMatcher
from spacegen.infrastructure.agents.content_builder import ContentBuilder
from spacegen.infrastructure.agents.planner import plan_workspace
from spacegen.infrastructure.agents.understanding import understand
from spacegen.infrastructure.workflow.emitter import EventEmitter

logger = logging.getLogger(__name__)

RECOVERABLE = (AllProvidersFailedError, ExtractionError)


def _route_after_understanding(state: BuildState) -> Literal["planning", "fallback"]:
    """Route: no profile → fallback, else → planning."""
    return "planning" if state.get("profile") is not None else "fallback"


async def _announce_profile(
    emitter: EventEmitter,
    matcher: WallpaperMatcher,
    prompt: str,
    profile: UnderstandingProfile,
) -> None:
    """understanding, wallpaper and prompt_keywords events."""
    await emitter.emit(
        GenerationEventType.UNDERSTANDING,
        {
            "summary": profile.summary,
            "identity": profile.identity.model_dump(by_alias=True, mode="json"),
            "goals": profile.goals.model_dump(by_alias=True, mode="json"),
            "tone": profile.tone,
        },
    )
    await emitter.emit(GenerationEventType.WALLPAPER, {"url": matcher.match(profile.wallpaper_keyword)})
    await emitter.emit(GenerationEventType.PROMPT_KEYWORDS, build_prompt_keywords(prompt, profile).to_payload())


async def _announce_plan(emitter: EventEmitter, plan: Plan) -> None:
    items = plan.sorted_items()
    await emitter.emit(
        GenerationEventType.PLAN,
        {
            "summary": plan.summary,
            "reasoning": plan.reasoning,
            "itemCount": len(items),
            "items": [i.summary() for i in items],
        },
    )


def build_space_graph(
    gateway: GatewayPort,
    content_builder: ContentBuilder,
    matcher: WallpaperMatcher,
    emitter: EventEmitter,
) -> StateGraph:
    """Build the pipeline graph. Nodes report progress through the emitter."""

    async def understanding_node(state: BuildState) -> BuildState:
        prompt = state.get("prompt", "")
        await emitter.phase(Phase.UNDERSTANDING)
        await emitter.thinking("Reading your request and figuring out who you are...", Phase.UNDERSTANDING)
        try:
            profile = await understand(gateway, prompt)
        except RECOVERABLE as e:
            logger.warning("Understanding failed, using fallback workspace: %s", e)
            return {"profile": None, "current_phase": Phase.UNDERSTANDING.value}
        await _announce_profile(emitter, matcher, prompt, profile)
        return {"profile": profile, "current_phase": Phase.UNDERSTANDING.value}

    async def fallback_node(state: BuildState) -> BuildState:
        """Deterministic profile, plan and content; no provider calls."""
        prompt = state.get("prompt", "")
        workspace = build_fallback_workspace(prompt)
        profile = workspace.to_profile()
        await emitter.thinking("Using a recommended layout for your workspace...", Phase.UNDERSTANDING)
        await _announce_profile(emitter, matcher, prompt, profile)

        plan = workspace.to_plan()
        await emitter.phase(Phase.PLANNING)
        await _announce_plan(emitter, plan)
        return {
            "profile": profile,
            "plan": plan,
            "plan_degraded": True,
            "prebuilt_content": {item.title: item.content for item in workspace.items},
            "used_fallback": True,
            "current_phase": Phase.PLANNING.value,
        }

    async def planning_node(state: BuildState) -> BuildState:
        profile = state["profile"]
        await emitter.phase(Phase.PLANNING)
        profession = profile.identity.profession or "you"
        await emitter.thinking(f"Designing a workspace for {profession}...", Phase.PLANNING)
        degraded = False
        try:
            plan = await plan_workspace(gateway, profile)
        except RECOVERABLE as e:
            logger.warning("Planning failed, using recommended layout: %s", e)
            plan = build_fallback_workspace(state.get("prompt", "")).to_plan()
            degraded = True
        await _announce_plan(emitter, plan)
        return {"plan": plan, "plan_degraded": degraded, "current_phase": Phase.PLANNING.value}

    async def building_node(state: BuildState) -> BuildState:
        profile = state["profile"]
        plan = state["plan"]
        prebuilt = state.get("prebuilt_content") or {}
        await emitter.phase(Phase.BUILDING)

        ordered = plan.sorted_items()
        built: list[WorkspaceItem] = []
        for item in ordered:
            await emitter.thinking(f"Creating {item.name}...", Phase.BUILDING)
            await emitter.emit(GenerationEventType.BUILDING, item.summary())
            if item.name in prebuilt:
                content = prebuilt[item.name]
            else:
                content = await content_builder.build(item, profile)
            workspace_item = WorkspaceItem.from_plan_item(item, content)
            built.append(workspace_item)
            await emitter.emit(
                GenerationEventType.CREATED,
                {"item": workspace_item.to_wire(), "remaining": len(ordered) - len(built)},
            )
        return {"items": built, "current_phase": Phase.BUILDING.value}

    async def complete_node(state: BuildState) -> BuildState:
        profile = state["profile"]
        await emitter.emit(
            GenerationEventType.COMPLETE,
            {
                "items": [i.to_wire() for i in state.get("items", [])],
                "summary": state["plan"].summary,
                "understanding": profile.summary,
            },
        )
        return {"current_phase": "complete"}

    builder = StateGraph(BuildState)
    builder.add_node("understanding", understanding_node)
    builder.add_node("fallback", fallback_node)
    builder.add_node("planning", planning_node)
    builder.add_node("building", building_node)
    builder.add_node("complete", complete_node)

    builder.add_edge(START, "understanding")
    builder.add_conditional_edges(
        "understanding",
        _route_after_understanding,
        path_map={"planning": "planning", "fallback": "fallback"},
    )
    builder.add_edge("planning", "building")
    builder.add_edge("fallback", "building")
    builder.add_edge("building", "complete")
    builder.add_edge("complete", END)

    return builder


def compile_space_graph(builder: StateGraph):
    """Compile graph. Runs are single-shot, so no checkpointer or thread_id."""
    return builder.compile()
