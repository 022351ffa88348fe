"""Event emitter - typed progress events pushed to a per-request sink."""

import asyncio
from collections.abc import Callable
from typing import Any

from spacegen.domain.entities.generation_events import (
    PHASE_MESSAGES,
    GenerationEvent,
    GenerationEventType,
    Phase,
)

# Events followed by the pacing delay so live progress stays readable
PACED_EVENTS = frozenset({GenerationEventType.THINKING, GenerationEventType.CREATED})


class EventEmitter:
    """Wraps a sink (usually queue.put_nowait) with event helpers and pacing."""

    def __init__(self, sink: Callable[[GenerationEvent], None], pacing_seconds: float = 0.0) -> None:
        self._sink = sink
        self._pacing = max(0.0, pacing_seconds)
        self.count = 0

    async def emit(self, event: GenerationEventType, data: dict[str, Any]) -> None:
        self._sink(GenerationEvent(event=event, data=data))
        self.count += 1
        if self._pacing and event in PACED_EVENTS:
            await asyncio.sleep(self._pacing)

    async def phase(self, phase: Phase) -> None:
        await self.emit(GenerationEventType.PHASE, {"phase": phase.value, "message": PHASE_MESSAGES[phase]})

    async def thinking(self, text: str, phase: Phase | None = None) -> None:
        data: dict[str, Any] = {"text": text}
        if phase is not None:
            data["phase"] = phase.value
        await self.emit(GenerationEventType.THINKING, data)

    async def error(self, message: str) -> None:
        await self.emit(GenerationEventType.ERROR, {"message": message})
