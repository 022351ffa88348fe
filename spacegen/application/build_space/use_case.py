"""Build-space use case - runs the LangGraph pipeline and streams its events."""

import asyncio
from collections.abc import AsyncIterator

import structlog

from spacegen.application.build_space.dto import BuildSpaceRequest
from spacegen.domain.entities.build_state import BuildState
from spacegen.domain.entities.generation_events import GenerationEvent, GenerationEventType
from spacegen.domain.errors import ValidationError
from spacegen.domain.ports.config import BuildConfig
from spacegen.domain.ports.llm import GatewayPort
from spacegen.domain.services.wallpaper_matcher import WallpaperMatcher
from spacegen.infrastructure.agents.content_builder import ContentBuilder
from spacegen.infrastructure.workflow import EventEmitter, build_space_graph, compile_space_graph

log = structlog.get_logger()

TIMED_OUT = "Workspace generation timed out"
GENERIC_FAILURE = "Something went wrong"


def _error(message: str) -> GenerationEvent:
    return GenerationEvent(event=GenerationEventType.ERROR, data={"message": message})


class BuildSpaceUseCase:
    """Orchestrates understanding → planning → building → complete for one prompt."""

    def __init__(
        self,
        gateway: GatewayPort,
        content_builder: ContentBuilder,
        matcher: WallpaperMatcher | None = None,
        config: BuildConfig | None = None,
    ) -> None:
        self._gateway = gateway
        self._content_builder = content_builder
        self._matcher = matcher or WallpaperMatcher()
        self._config = config or BuildConfig()

    async def execute_stream(self, request: BuildSpaceRequest) -> AsyncIterator[GenerationEvent]:
        """Yield progress events; ends after exactly one `complete` or `error`."""
        try:
            prompt = request.validated_prompt(self._config.min_prompt_length)
        except ValidationError as e:
            yield _error(str(e))
            return

        queue: asyncio.Queue[GenerationEvent] = asyncio.Queue()
        emitter = EventEmitter(queue.put_nowait, pacing_seconds=self._config.event_pacing_seconds)
        builder = build_space_graph(self._gateway, self._content_builder, self._matcher, emitter)
        graph = compile_space_graph(builder)
        initial: BuildState = {"prompt": prompt, "used_fallback": False, "plan_degraded": False}

        async def run_graph() -> None:
            try:
                final = await graph.ainvoke(initial)
                log.info(
                    "build_complete",
                    items=len(final.get("items", [])),
                    used_fallback=final.get("used_fallback", False),
                    plan_degraded=final.get("plan_degraded", False),
                )
            except Exception as e:
                log.exception("build_failed")
                queue.put_nowait(_error(str(e) or GENERIC_FAILURE))

        log.info("build_started", prompt_length=len(prompt))
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._config.max_duration_seconds
        task = asyncio.create_task(run_graph())
        try:
            while True:
                try:
                    async with asyncio.timeout_at(deadline):
                        event = await queue.get()
                except TimeoutError:
                    log.warning("build_timeout", max_duration_seconds=self._config.max_duration_seconds)
                    yield _error(TIMED_OUT)
                    break
                yield event
                if event.is_terminal:
                    break
        finally:
            # Stops in-flight provider calls when the client disconnects or time runs out
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
