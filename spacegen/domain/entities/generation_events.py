"""Generation event types for SSE streaming."""

import json
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict


class GenerationEventType(str, Enum):
    """Event names streamed to the client."""

    ERROR = "error"
    PHASE = "phase"
    THINKING = "thinking"
    UNDERSTANDING = "understanding"
    WALLPAPER = "wallpaper"
    PROMPT_KEYWORDS = "prompt_keywords"
    PLAN = "plan"
    BUILDING = "building"
    CREATED = "created"
    COMPLETE = "complete"


class Phase(str, Enum):
    """Pipeline phases announced by `phase` events."""

    UNDERSTANDING = "understanding"
    PLANNING = "planning"
    BUILDING = "building"


PHASE_MESSAGES = MappingProxyType(
    {
        Phase.UNDERSTANDING: "Understanding your needs...",
        Phase.PLANNING: "Designing your space...",
        Phase.BUILDING: "Creating your components...",
    }
)

TERMINAL_EVENTS = frozenset({GenerationEventType.ERROR, GenerationEventType.COMPLETE})


class GenerationEvent(BaseModel):
    """One frame of the progress stream."""

    model_config = ConfigDict(frozen=True)

    event: GenerationEventType
    data: dict[str, Any]

    @property
    def is_terminal(self) -> bool:
        return self.event in TERMINAL_EVENTS

    def to_sse(self) -> dict[str, str]:
        """Shape accepted by sse_starlette: `event: <name>` / `data: <json>`."""
        return {"event": self.event.value, "data": json.dumps(self.data, ensure_ascii=False)}
