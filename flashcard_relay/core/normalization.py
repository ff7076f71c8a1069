"""Recover structured JSON from free-form completion text.

Models are asked for raw JSON but regularly wrap it in prose or markdown
fences. ``extract_json`` first parses the whole reply; failing that it takes
the span from the first opening bracket to the last closing bracket and
parses that. The span is greedy, not a balanced-bracket scan, so a reply
holding two separate blobs yields one span covering both (which then fails
to parse).
"""

from __future__ import annotations

import json
import re
from typing import Any

from .errors import NormalizationError
from .types import JSONShape

NORMALIZATION_FAILURE_MESSAGE = "Could not extract structured data from model output"

_GREEDY_SPANS = {
    JSONShape.ARRAY: re.compile(r"\[[\s\S]*\]"),
    JSONShape.OBJECT: re.compile(r"\{[\s\S]*\}"),
}


def extract_json(text: str, shape: JSONShape) -> Any:
    candidate = (text or "").strip()

    parsed = _loads_or_none(candidate)
    if parsed is not None and shape.matches(parsed):
        return parsed

    span = find_greedy_span(candidate, shape)
    if span is None:
        raise NormalizationError(
            status_code=500,
            message=NORMALIZATION_FAILURE_MESSAGE,
            details=f"No JSON {shape.value} found in model output.",
        )

    parsed = _loads_or_none(span)
    if parsed is None or not shape.matches(parsed):
        raise NormalizationError(
            status_code=500,
            message=NORMALIZATION_FAILURE_MESSAGE,
            details=f"Extracted JSON {shape.value} could not be parsed.",
        )

    return parsed


def find_greedy_span(text: str, shape: JSONShape) -> str | None:
    match = _GREEDY_SPANS[shape].search(text)
    if match is None:
        return None
    return match.group(0)


def _loads_or_none(text: str) -> Any:
    if not text:
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None
