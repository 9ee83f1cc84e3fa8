# =============================================================================
# Event Envelope - Outbound EventBridge Entry
# =============================================================================
# One EventEnvelope is built per request and turned into a single PutEvents
# entry. Envelopes are never persisted.
# =============================================================================

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

BUS_ARN_TEMPLATE = "arn:aws:events:{region}:{account_id}:event-bus/{prefix}{stage}"


def format_bus_name(
    account_id: str,
    stage: str,
    region: str = "us-east-1",
    prefix: str = "access-point-bus-",
) -> str:
    """Build the event bus ARN for an account and stage."""
    return BUS_ARN_TEMPLATE.format(
        region=region,
        account_id=account_id,
        prefix=prefix,
        stage=stage,
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EventEnvelope:
    """
    Event submitted to the access point bus.

    Attributes:
        source: Publishing component (EventBridge "Source")
        detail_type: Semantic event type (EventBridge "DetailType")
        detail: Merged request payload
        bus_name: Target event bus ARN
        time: Submission time, timezone-aware UTC
    """
    source: str
    detail_type: str
    detail: Dict[str, Any]
    bus_name: str
    time: datetime = field(default_factory=_utc_now)

    @property
    def detail_json(self) -> str:
        """Detail serialized as JSON text."""
        return json.dumps(self.detail, ensure_ascii=False)

    def to_entry(self) -> Dict[str, Any]:
        """Convert to a PutEvents request entry."""
        return {
            "Source": self.source,
            "DetailType": self.detail_type,
            "Detail": self.detail_json,
            "EventBusName": self.bus_name,
            "Time": self.time,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert envelope to a JSON-friendly dictionary."""
        return {
            "source": self.source,
            "detailType": self.detail_type,
            "detail": self.detail,
            "busName": self.bus_name,
            "time": self.time.isoformat(),
        }

    @classmethod
    def for_config(
        cls,
        detail: Dict[str, Any],
        config: Any,
        time: Optional[datetime] = None,
    ) -> "EventEnvelope":
        """Create envelope addressed to the bus of the configured stage."""
        return cls(
            source=config.event_source,
            detail_type=config.detail_type,
            detail=detail,
            bus_name=config.bus_name,
            time=time or _utc_now(),
        )
