"""Cleaning and validation of raw completion text.

A completion is only trusted once it has been turned into a ChartPayload or
DiagramPayload. Anything short of that raises ResponseParseError and the
caller discards the response entirely.
"""

import json
import re
from typing import Any

from pydantic import ValidationError

from rechart.dsl.schema import ChartPayload, DiagramPayload

CODE_FENCE_PATTERN = re.compile(r"```(?:json)?")


class ResponseParseError(ValueError):
    """Raised when completion text is not a usable payload."""


def _reject_constant(name: str) -> Any:
    raise ResponseParseError(f"Response is not valid JSON: {name} is not allowed")


def strip_code_fences(text: str) -> str:
    """Remove Markdown code fences and surrounding whitespace."""
    return CODE_FENCE_PATTERN.sub("", text).strip()


def parse_json_object(text: str) -> dict[str, Any]:
    """Parse completion text into a payload object.

    Accepts either ``{"processedData": {...}}`` or the bare object.

    Args:
        text: Raw completion text.

    Returns:
        The unwrapped payload mapping.

    Raises:
        ResponseParseError: Not strict JSON (NaN and Infinity are rejected),
            or not a JSON object.
    """
    cleaned = strip_code_fences(text or "")

    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ResponseParseError(f"Expected a JSON object, got {type(parsed).__name__}")

    processed = parsed.get("processedData") or parsed
    if not isinstance(processed, dict):
        raise ResponseParseError("processedData is not an object")

    return processed


def parse_chart_response(text: str) -> ChartPayload:
    """Parse and validate a chart completion.

    Raises:
        ResponseParseError: Unparsable text, missing or non-list chartData,
            or a payload that does not fit the chart schema.
    """
    processed = parse_json_object(text)

    if not isinstance(processed.get("chartData"), list):
        raise ResponseParseError("Invalid data structure from AI: chartData must be a list")

    try:
        return ChartPayload.model_validate(processed)
    except ValidationError as e:
        raise ResponseParseError(f"Invalid chart payload from AI: {e}") from e


def parse_diagram_response(text: str, diagram_type: str | None = None) -> DiagramPayload:
    """Parse and validate a diagram completion.

    A missing diagramType is taken from the requested diagram_type.

    Raises:
        ResponseParseError: Unparsable text, missing mermaidCode, or a
            payload that does not fit the diagram schema.
    """
    processed = parse_json_object(text)

    if not processed.get("mermaidCode"):
        raise ResponseParseError("Invalid diagram structure from AI: mermaidCode missing")

    if not processed.get("diagramType") and diagram_type:
        processed = {**processed, "diagramType": diagram_type}

    try:
        return DiagramPayload.model_validate(processed)
    except ValidationError as e:
        raise ResponseParseError(f"Invalid diagram payload from AI: {e}") from e
