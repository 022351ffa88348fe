"""JSON extractor - recover a JSON object from free-form model output.

Order of attempts:
1. the first fenced code block (``` or ```json), trimmed
2. the span from the first '{' to the last '}' in the text

The brace scan is not depth-aware: prose containing stray braces around the
JSON can make it grab the wrong span. Callers treat ExtractionError as a
recoverable failure and substitute a placeholder.
"""

import json
import logging
import re
from typing import Any

from spacegen.domain.errors import ExtractionError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:[\w-]+)?\s*([\s\S]*?)```")


def _parse_object(candidate: str) -> dict[str, Any]:
    parsed = json.loads(candidate)
    if not isinstance(parsed, dict):
        raise ExtractionError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed


def extract_json(text: str) -> dict[str, Any]:
    """Extract the JSON object embedded in model text. Raises ExtractionError."""
    text = text or ""

    fence = _FENCE_RE.search(text)
    if fence:
        try:
            return _parse_object(fence.group(1).strip())
        except (json.JSONDecodeError, ExtractionError) as e:
            logger.debug("Fenced block is not a JSON object: %s", e)

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        raise ExtractionError("No JSON object found in response")
    try:
        return _parse_object(text[start : end + 1])
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Malformed JSON in response: {e.msg}") from e
