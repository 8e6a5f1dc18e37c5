import json
import math
import re
import logging
from typing import Any, Dict, List

from hackathon_scorer.errors import DecodeError

logger = logging.getLogger(__name__)

JSON_FENCE_PATTERN = re.compile(r"```json\s*([\s\S]*?)```", re.IGNORECASE)


def extract_json_block(text: str) -> str:
    """
    Pick the part of an LLM reply that should hold the JSON payload.

    A fenced ```json block wins; otherwise everything from the first '{' to
    the last '}'; otherwise the text unchanged.
    """
    match = JSON_FENCE_PATTERN.search(text)
    if match:
        return match.group(1)

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1:
        return text[start:end + 1]

    return text


def decode(raw_text: str) -> Any:
    """Extract and parse the JSON payload of an LLM reply"""

    json_text = extract_json_block(raw_text)
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.warning(f"Model output is not valid JSON: {e}")
        raise DecodeError(f"Could not parse model output as JSON: {e}", raw_text) from e


def as_object(data: Any) -> Dict[str, Any]:
    """Decoded payloads that are not JSON objects count as empty ones"""
    return data if isinstance(data, dict) else {}


def coerce_list(value: Any) -> List[Dict[str, Any]]:
    """
    Keep only the JSON objects of a sequence field.

    Missing or non-list values become an empty list.
    """
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]


def coerce_number(value: Any) -> float:
    """
    Coerce an untrusted numeric field to a finite float.

    Numbers and numeric strings pass, everything else becomes 0.
    """
    if isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0

    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def coerce_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def reported_total(value: Any) -> float:
    """
    The aggregate the model reported, or 0 when it is not a real number.

    Numeric strings are not trusted here; a 0 tells the caller to recompute.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return float(value)
