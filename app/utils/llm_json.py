"""Best-effort recovery of JSON values from free-form model output."""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

_JSON_FENCE = re.compile(r"```json", re.IGNORECASE)
_FENCE = "```"

# Greedy object anywhere, or an array that runs to the very end of the text.
# An array followed by trailing commentary is not recovered.
_JSON_BLOCK = re.compile(r"\{[\s\S]*\}|\[[\s\S]*\]\Z")


@dataclass(frozen=True)
class Parsed:
    """Successful lenient parse; ``value`` may legitimately be ``None``."""
    value: Any


@dataclass(frozen=True)
class ParseFailed:
    reason: str


ParseResult = Union[Parsed, ParseFailed]


def strip_code_fence(text: Optional[str]) -> Optional[str]:
    """Remove ```json / ``` markers and surrounding whitespace.

    Returns ``None`` for empty input. Removal repeats until the text is
    stable so that a second call never changes the result.
    """
    if not text:
        return None
    cleaned = text
    while True:
        stripped = _JSON_FENCE.sub("", cleaned).replace(_FENCE, "").strip()
        if stripped == cleaned:
            return cleaned or None
        cleaned = stripped


def _loads(text: str) -> ParseResult:
    try:
        return Parsed(json.loads(text))
    except (ValueError, RecursionError) as e:
        return ParseFailed(str(e))


def parse_json_lenient(text: Optional[str]) -> ParseResult:
    """Parse ``text`` as JSON, falling back to the first embedded object/array."""
    if not text:
        return ParseFailed("empty input")

    result = _loads(text)
    if isinstance(result, Parsed):
        return result

    # Neither alternative can match; skip the quadratic scan over long text
    if not (text.endswith("]") or ("{" in text and "}" in text)):
        return ParseFailed(f"no JSON value found: {result.reason}")
    match = _JSON_BLOCK.search(text)
    if not match:
        return ParseFailed(f"no JSON value found: {result.reason}")
    return _loads(match.group(0))


def truncate(text: Optional[str], limit: int = 2000) -> str:
    if not text:
        return ""
    if len(text) <= limit:
        return text
    return text[:limit] + f"... (truncated {len(text) - limit} chars)"


def json_type_name(value: Any) -> str:
    """Name of the JSON type a parsed value came from."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
