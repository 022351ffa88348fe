"""Onboarding API routes - intent parsing and note content, as JSON envelopes."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaError

from spacegen.api.dependencies import (
    get_generate_content_use_case,
    get_parse_intent_use_case,
    limiter,
    rate_limit,
)
from spacegen.application.generate_content import GenerateContentRequest, GenerateContentUseCase
from spacegen.application.parse_intent import ParseIntentRequest, ParseIntentUseCase
from spacegen.domain.errors import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


def _failure(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"code": code, "message": message}},
    )


@router.post("/parse-intent", response_model=None)
@limiter.limit(rate_limit)
async def parse_intent(
    request: Request,
    body: ParseIntentRequest,
    use_case: ParseIntentUseCase = Depends(get_parse_intent_use_case),
) -> dict | JSONResponse:
    """Template, widgets, folders and notes for a prompt. Model failures fall back to templates."""
    try:
        intent = await use_case.execute(body)
    except ValidationError as e:
        return _failure(400, "VALIDATION_ERROR", str(e))
    except Exception:
        logger.exception("Parse intent failed")
        return _failure(500, "SERVER_ERROR", "Failed to parse intent")
    return {"success": True, "data": intent.to_wire()}


@router.post("/generate-content", response_model=None)
@limiter.limit(rate_limit)
async def generate_content(
    request: Request,
    body: dict[str, Any] = Body(...),
    use_case: GenerateContentUseCase = Depends(get_generate_content_use_case),
) -> dict | JSONResponse:
    """HTML content per note title for an intent returned by parse-intent."""
    try:
        content_request = GenerateContentRequest.model_validate(body)
    except SchemaError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first["loc"])
        return _failure(400, "VALIDATION_ERROR", f"{field}: {first['msg']}")
    try:
        content = await use_case.execute(content_request)
    except Exception:
        logger.exception("Generate content failed")
        return _failure(500, "SERVER_ERROR", "Failed to generate content")
    return {"success": True, "data": content}
