# =============================================================================
# Dependency Injection Container
# =============================================================================
# Provides the relay configuration and the lazy-loaded EventBridge client.
# One Deps lives per Lambda container so the client is reused across
# invocations.
# =============================================================================

import logging
import os
from dataclasses import dataclass, field
from functools import cached_property
from typing import Optional

import boto3

from access_point.runtime.config import DEFAULT_BUS_REGION, RelayConfig
from access_point.runtime.publisher import EventPublisher

logger = logging.getLogger(__name__)


@dataclass
class Deps:
    """
    Dependency injection container for the relay.

    Nothing is created until first access, so the module can be imported
    without AWS credentials or environment configuration.

    Usage:
        deps = get_deps()
        deps.publisher.publish({"name": "Ana"})
    """
    region: Optional[str] = None
    _config: Optional[RelayConfig] = field(default=None, repr=False)

    @cached_property
    def config(self) -> RelayConfig:
        """Relay configuration, read from the environment on first access."""
        if self._config is not None:
            return self._config
        config = RelayConfig.from_env()
        logger.info(f"Loaded config stage={config.stage} bus={config.bus_name}")
        return config

    @cached_property
    def eventbridge(self):
        """EventBridge client, in the region of the target bus."""
        region = self.region or self.config.bus_region or DEFAULT_BUS_REGION
        return boto3.client("events", region_name=region)

    @cached_property
    def publisher(self) -> EventPublisher:
        """Publisher bound to the shared client and config."""
        return EventPublisher(self.eventbridge, self.config)


def create_deps(region: Optional[str] = None, config: Optional[RelayConfig] = None) -> Deps:
    """Create a new Deps instance."""
    return Deps(region=region or os.environ.get("EVENT_BUS_REGION"), _config=config)


# Process-wide instance, reused by warm Lambda containers
_global_deps: Optional[Deps] = None


def get_deps() -> Deps:
    """Get or create global Deps instance."""
    global _global_deps
    if _global_deps is None:
        _global_deps = create_deps()
    return _global_deps


def reset_deps() -> None:
    """Drop the global Deps instance (tests, config reload)."""
    global _global_deps
    _global_deps = None
