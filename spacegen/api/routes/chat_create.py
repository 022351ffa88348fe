"""Chat-create API route - one item from a chat message, streamed."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sse_starlette.sse import EventSourceResponse

from spacegen.api.dependencies import get_chat_create_use_case, limiter, rate_limit
from spacegen.application.chat_create.dto import ChatCreateRequest
from spacegen.application.chat_create.use_case import ChatCreateUseCase

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/chat-create", response_model=None)
@limiter.limit(rate_limit)
async def chat_create(
    request: Request,
    chat_request: ChatCreateRequest,
    use_case: ChatCreateUseCase = Depends(get_chat_create_use_case),
) -> EventSourceResponse | JSONResponse:
    if chat_request.is_too_short:
        return JSONResponse(status_code=400, content={"error": "Message too short"})

    async def event_generator():
        try:
            async for event in use_case.execute_stream(chat_request):
                yield event.to_sse()
        except Exception:
            logger.exception("Chat-create stream failed")
            yield {"event": "error", "data": json.dumps({"message": "Something went wrong"})}

    return EventSourceResponse(event_generator(), sep="\n")
