"""Build-space API route - SSE stream of pipeline progress."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from sse_starlette.sse import EventSourceResponse

from spacegen.api.dependencies import get_build_space_use_case, limiter, rate_limit
from spacegen.application.build_space.dto import BuildSpaceRequest
from spacegen.application.build_space.use_case import BuildSpaceUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/build-space", response_model=None)
@limiter.limit(rate_limit)
async def build_space(
    request: Request,
    build_request: BuildSpaceRequest,
    use_case: BuildSpaceUseCase = Depends(get_build_space_use_case),
) -> EventSourceResponse:
    """Build a workspace from a prompt, streaming `event: <name>` / `data: <json>` frames."""

    async def event_generator():
        try:
            async for event in use_case.execute_stream(build_request):
                yield event.to_sse()
        except Exception:
            logger.exception("Build-space stream failed")
            yield {"event": "error", "data": json.dumps({"message": "Something went wrong"})}

    return EventSourceResponse(event_generator(), sep="\n")
