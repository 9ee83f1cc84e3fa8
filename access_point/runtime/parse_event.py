# =============================================================================
# Event Parser - Detect and Parse Lambda Events
# =============================================================================
# Detects how the Lambda was invoked and extracts the raw request body.
# Supports: API Gateway (HTTP API v2, REST API v1), Direct Invoke
# =============================================================================

import base64
import binascii
import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from access_point.runtime.errors import ParseError

logger = logging.getLogger(__name__)


class EventSource:
    """Event source identifiers."""
    API_GATEWAY = "api_gateway"
    DIRECT = "direct"
    UNKNOWN = "unknown"


@dataclass
class InboundRequest:
    """
    Raw request extracted from a Lambda event.

    Attributes:
        request_id: API Gateway request id, or a generated UUID
        source: How the Lambda was invoked (see EventSource)
        body: Raw body text, None when the request had no body
        metadata: Method, path and stage for logging
    """
    request_id: str
    source: str
    body: Optional[str]
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_body(self) -> bool:
        return bool(self.body and self.body.strip())


def detect_event_source(event: Any) -> str:
    """
    Detect the source of a Lambda event.

    Returns one of: api_gateway, direct, unknown
    """
    if event is None or event == {}:
        return EventSource.UNKNOWN

    # Lists, strings and numbers are direct invokes; the normalizer rejects them
    if not isinstance(event, dict):
        return EventSource.DIRECT

    # API Gateway HTTP API (v2) or REST API (v1)
    request_context = event.get("requestContext") or {}
    if "http" in request_context or "httpMethod" in request_context:
        return EventSource.API_GATEWAY

    # Proxy events always carry a body key, even when it is null
    if "body" in event:
        return EventSource.API_GATEWAY

    return EventSource.DIRECT


def _decode_body(body: Any, is_base64: bool) -> Optional[str]:
    """Normalize the body field into text."""
    if body is None:
        return None

    # Test consoles sometimes send the body already parsed
    if isinstance(body, (dict, list)):
        return json.dumps(body)

    if not isinstance(body, str):
        raise ParseError(f"Unsupported body type: {type(body).__name__}")

    if is_base64:
        try:
            return base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise ParseError(f"Request body is not valid base64 UTF-8: {e}") from e

    return body


def _parse_api_gateway_event(event: Dict[str, Any]) -> InboundRequest:
    """Parse API Gateway HTTP API or REST API event."""
    request_context = event.get("requestContext") or {}

    request_id = (
        request_context.get("requestId") or
        (event.get("headers") or {}).get("x-amzn-trace-id") or
        str(uuid.uuid4())
    )

    body = _decode_body(event.get("body"), bool(event.get("isBase64Encoded")))

    return InboundRequest(
        request_id=request_id,
        source=EventSource.API_GATEWAY,
        body=body,
        metadata={
            "httpMethod": (request_context.get("http") or {}).get("method") or request_context.get("httpMethod"),
            "path": (request_context.get("http") or {}).get("path") or event.get("path"),
            "stage": request_context.get("stage"),
        },
    )


def _parse_direct_event(event: Any) -> InboundRequest:
    """Parse direct Lambda invoke event; the event itself is the payload."""
    return InboundRequest(
        request_id=str(uuid.uuid4()),
        source=EventSource.DIRECT,
        body=json.dumps(event),
    )


def parse_event(event: Any) -> InboundRequest:
    """
    Parse a Lambda event into an InboundRequest.

    Raises:
        ParseError: body cannot be turned into text
    """
    source = detect_event_source(event)
    logger.info(f"Detected event source: {source}")

    if source == EventSource.API_GATEWAY:
        return _parse_api_gateway_event(event)

    if source == EventSource.DIRECT:
        return _parse_direct_event(event)

    logger.warning("Empty event, treating as request without body")
    return InboundRequest(
        request_id=str(uuid.uuid4()),
        source=EventSource.UNKNOWN,
        body=None,
    )
