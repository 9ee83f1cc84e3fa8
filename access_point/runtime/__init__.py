# =============================================================================
# Runtime Package - Request to Event Relay
# =============================================================================
# Provides the pieces the API handler chains together:
# - parse_event: Lambda event -> raw request body
# - normalize: raw body -> merged event detail
# - EventPublisher: merged detail -> one EventBridge event
# - Deps: configuration and the shared EventBridge client
# =============================================================================

from access_point.runtime.config import RelayConfig
from access_point.runtime.cors import cors_headers
from access_point.runtime.deps import Deps, create_deps, get_deps
from access_point.runtime.envelope import EventEnvelope, format_bus_name
from access_point.runtime.errors import ConfigError, ParseError, PublishError, RelayError
from access_point.runtime.normalizer import KNOWN_FIELDS, normalize
from access_point.runtime.parse_event import InboundRequest, detect_event_source, parse_event
from access_point.runtime.publisher import EventPublisher, PublishResult

__all__ = [
    "RelayConfig",
    "cors_headers",
    "Deps",
    "create_deps",
    "get_deps",
    "EventEnvelope",
    "format_bus_name",
    "RelayError",
    "ParseError",
    "ConfigError",
    "PublishError",
    "KNOWN_FIELDS",
    "normalize",
    "InboundRequest",
    "detect_event_source",
    "parse_event",
    "EventPublisher",
    "PublishResult",
]
