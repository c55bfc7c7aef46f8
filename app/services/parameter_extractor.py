import json
import logging
import math
import re
from typing import Any, Dict, List, Optional

from app.core.exceptions import ExtractionParseError
from app.models.interview import ExtractedParameters
from app.utils.llm_json import Parsed, ParseResult

logger = logging.getLogger(__name__)

DEFAULT_AMOUNT = 10
MAX_AMOUNT = 50

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_text(value: Any) -> str:
    """String form of a JSON value as the web client renders it.

    Arrays join with commas, booleans are lowercase and integral floats drop
    their ".0"; objects are serialized as JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, list):
        return ",".join(coerce_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _text_field(data: Dict[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if not value:
        return default
    return coerce_text(value).strip()


def _parse_int(raw: Any) -> Optional[int]:
    """Leading integer of ``raw``'s string form, e.g. "7 questions" -> 7."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def normalize_amount(raw: Any, default: int = DEFAULT_AMOUNT, maximum: int = MAX_AMOUNT) -> int:
    """Number of questions to request.

    Anything that does not parse to a positive integer falls back to
    ``default``; the result is capped at ``maximum``.
    """
    amount = _parse_int(raw)
    if amount is None or amount <= 0:
        amount = default
    return min(amount, maximum)


def split_techstack(techstack: str) -> List[str]:
    if not techstack:
        return []
    return [item.strip() for item in techstack.split(",") if item.strip()]


def extract_parameters(
    result: ParseResult,
    default_amount: int = DEFAULT_AMOUNT,
    max_amount: int = MAX_AMOUNT,
) -> ExtractedParameters:
    """Build ExtractedParameters from the parsed extraction response.

    Raises:
        ExtractionParseError: the response did not contain a JSON object.
        An array counts as an object without fields, so every field
        takes its default.
    """
    if not isinstance(result, Parsed) or not isinstance(result.value, (dict, list)):
        reason = getattr(result, "reason", None) or f"got {type(getattr(result, 'value', None)).__name__}"
        raise ExtractionParseError(
            "Failed to parse extracted variables from model output.",
            details={"reason": reason},
        )

    data = result.value if isinstance(result.value, dict) else {}
    params = ExtractedParameters(
        role=_text_field(data, "role"),
        level=_text_field(data, "level"),
        techstack=_text_field(data, "techstack"),
        type=_text_field(data, "type", default="mixed"),
        amount=normalize_amount(data.get("amount"), default_amount, max_amount),
    )
    logger.debug(f"Extracted parameters: {params.model_dump()}")
    return params
