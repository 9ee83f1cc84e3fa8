# =============================================================================
# Event Publisher
# =============================================================================
# Builds one EventEnvelope per request and submits it with a single
# PutEvents call. The call is awaited: transport errors and rejected entries
# are raised as PublishError before the handler answers the caller.
# =============================================================================

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from access_point.runtime.config import RelayConfig
from access_point.runtime.envelope import EventEnvelope
from access_point.runtime.errors import PublishError

logger = logging.getLogger(__name__)


@dataclass
class PublishResult:
    """Outcome of an accepted publish."""
    event_id: str
    envelope: EventEnvelope


class EventPublisher:
    """
    Publishes merged request details to the access point bus.

    The EventBridge client is shared by every invocation in the process;
    boto3 clients are safe to use from multiple threads.
    """

    def __init__(self, client: Any, config: RelayConfig):
        self.client = client
        self.config = config

    def build_envelope(self, detail: Dict[str, Any], time: Optional[datetime] = None) -> EventEnvelope:
        """Build the envelope for the configured stage and account."""
        return EventEnvelope.for_config(detail, self.config, time=time)

    def publish(self, detail: Dict[str, Any]) -> PublishResult:
        """
        Publish one event.

        Every call produces a new event; nothing is deduplicated.

        Raises:
            PublishError: the call failed or EventBridge rejected the entry
        """
        envelope = self.build_envelope(detail)
        logger.info(f"Publishing event source={envelope.source} bus={envelope.bus_name}")

        try:
            response = self.client.put_events(Entries=[envelope.to_entry()])
        except ClientError as e:
            error = e.response.get("Error", {})
            raise PublishError(
                f"PutEvents call failed: {e}",
                error_code=error.get("Code"),
                error_message=error.get("Message"),
            ) from e
        except BotoCoreError as e:
            raise PublishError(f"PutEvents call failed: {e}") from e

        entries = response.get("Entries") or [{}]
        entry = entries[0]

        if response.get("FailedEntryCount", 0) > 0 or entry.get("ErrorCode"):
            raise PublishError(
                f"EventBridge rejected event: {entry.get('ErrorCode')} {entry.get('ErrorMessage')}",
                error_code=entry.get("ErrorCode"),
                error_message=entry.get("ErrorMessage"),
            )

        event_id = entry.get("EventId", "")
        logger.info(f"Event published event_id={event_id}")
        return PublishResult(event_id=event_id, envelope=envelope)
