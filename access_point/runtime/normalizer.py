# =============================================================================
# Payload Normalizer
# =============================================================================
# Raw request body -> merged event detail.
#
#   1. parse the body as a JSON object (absent body -> {})
#   2. pick the known fields out of it
#   3. overlay the known fields on the full payload
#
# Step 3 is currently a no-op because the known fields are copied verbatim.
# The two steps stay separate so known fields can later be renamed or
# transformed without touching the rest of the payload.
# =============================================================================

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from access_point.runtime.errors import ParseError

logger = logging.getLogger(__name__)

JsonValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]

KNOWN_FIELDS: Tuple[str, ...] = ("name", "married")


def parse_body(body: Optional[str]) -> Dict[str, JsonValue]:
    """
    Parse a request body into a mapping.

    An absent or blank body yields an empty mapping. Anything else must be a
    JSON object.

    Raises:
        ParseError: body is not valid JSON or not a JSON object
    """
    if body is None or not body.strip():
        return {}

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"Request body is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ParseError(
            f"Request body must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def filter_known_fields(
    payload: Dict[str, JsonValue],
    known_fields: Iterable[str] = KNOWN_FIELDS,
) -> Dict[str, JsonValue]:
    """Select the entries whose key is a known field. Values are untouched."""
    known = set(known_fields)
    return {key: value for key, value in payload.items() if key in known}


def merge_detail(
    payload: Dict[str, JsonValue],
    known: Dict[str, JsonValue],
) -> Dict[str, JsonValue]:
    """Overlay the known fields on the full payload."""
    return {**payload, **known}


def normalize(body: Optional[str]) -> Dict[str, JsonValue]:
    """Turn a raw request body into the event detail."""
    payload = parse_body(body)
    known = filter_known_fields(payload)
    detail = merge_detail(payload, known)

    logger.info(f"Normalized payload keys={sorted(detail)} known={sorted(known)}")
    return detail
