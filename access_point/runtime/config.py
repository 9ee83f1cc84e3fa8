# =============================================================================
# Relay Configuration
# =============================================================================
# Stage, account and bus settings read once from the Lambda environment.
# The resulting RelayConfig is immutable and passed explicitly to the
# normalizer, publisher and response builder.
# =============================================================================

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from access_point.runtime.envelope import format_bus_name
from access_point.runtime.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_BUS_REGION = "us-east-1"
DEFAULT_BUS_PREFIX = "access-point-bus-"
DEFAULT_EVENT_SOURCE = "Lambda publish"
DEFAULT_DETAIL_TYPE = "ejecuta lambda"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_env(environ: Mapping[str, str], key: str, default: str = "") -> str:
    return (environ.get(key) or default).strip()


def _get_env_json(environ: Mapping[str, str], key: str) -> Dict[str, str]:
    raw = _get_env(environ, key, "{}") or "{}"
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Failed to parse {key}, ignoring it")
        return {}
    if not isinstance(value, dict):
        logger.warning(f"{key} must be a JSON object, ignoring it")
        return {}
    return {str(k): str(v) for k, v in value.items()}


def _get_log_level(environ: Mapping[str, str]) -> str:
    level = _get_env(environ, "LOG_LEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown LOG_LEVEL {level!r}, using INFO")
        return "INFO"
    return level


def _require(environ: Mapping[str, str], key: str) -> str:
    value = _get_env(environ, key)
    if not value:
        raise ConfigError(f"Missing required environment variable: {key}")
    return value


@dataclass(frozen=True)
class RelayConfig:
    """
    Process-wide relay settings.

    Attributes:
        stage: Deployment stage (dev, prod, ...), selects the target bus
        account_id: AWS account that owns the bus
        bus_region: Region in the bus ARN
        bus_prefix: Bus name prefix, the stage is appended to it
        event_source: Source field of every published event
        detail_type: DetailType field of every published event
        cors_origins: Allowed CORS origin per stage
        log_level: Root logger level for the Lambda
    """
    stage: str
    account_id: str
    bus_region: str = DEFAULT_BUS_REGION
    bus_prefix: str = DEFAULT_BUS_PREFIX
    event_source: str = DEFAULT_EVENT_SOURCE
    detail_type: str = DEFAULT_DETAIL_TYPE
    cors_origins: Dict[str, str] = field(default_factory=dict)
    log_level: str = "INFO"

    @property
    def bus_name(self) -> str:
        """Full ARN of the target event bus."""
        return format_bus_name(
            self.account_id,
            self.stage,
            region=self.bus_region,
            prefix=self.bus_prefix,
        )

    @property
    def cors_origin(self) -> Optional[str]:
        """Allowed origin configured for the current stage."""
        return self.cors_origins.get(self.stage)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RelayConfig":
        """Build configuration from environment variables."""
        if environ is None:
            environ = os.environ

        return cls(
            stage=_require(environ, "STAGE"),
            account_id=_require(environ, "ACCOUNT_ID"),
            bus_region=_get_env(environ, "EVENT_BUS_REGION", DEFAULT_BUS_REGION),
            bus_prefix=_get_env(environ, "EVENT_BUS_PREFIX", DEFAULT_BUS_PREFIX),
            event_source=_get_env(environ, "EVENT_SOURCE", DEFAULT_EVENT_SOURCE),
            detail_type=_get_env(environ, "EVENT_DETAIL_TYPE", DEFAULT_DETAIL_TYPE),
            cors_origins=_get_env_json(environ, "CORS_ORIGINS_JSON"),
            log_level=_get_log_level(environ),
        )
