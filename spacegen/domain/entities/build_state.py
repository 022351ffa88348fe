"""Build state schema for LangGraph."""

from typing import TypedDict

from spacegen.domain.entities.workspace import Plan, UnderstandingProfile, WorkspaceItem


class BuildState(TypedDict, total=False):
    """State passed between build graph nodes. All fields optional for incremental build."""

    # Input
    prompt: str

    # Phases
    profile: UnderstandingProfile | None  # None when Understanding failed
    plan: Plan
    plan_degraded: bool  # Plan came from the fallback generator
    prebuilt_content: dict[str, str]  # Item name -> deterministic content (fallback path)
    items: list[WorkspaceItem]

    # Metadata
    current_phase: str
    used_fallback: bool  # Whole workspace came from the fallback generator
