# =============================================================================
# Error Taxonomy
# =============================================================================
# Every failure in the relay is a RelayError. The API handler collapses them
# into one generic 500 response; the subclasses only show up in logs.
# =============================================================================

from typing import Optional


class RelayError(Exception):
    """Base class for all relay failures."""


class ParseError(RelayError):
    """Request body is present but is not a JSON object."""


class ConfigError(RelayError):
    """Required environment configuration is missing."""


class PublishError(RelayError):
    """EventBridge rejected the event or the call itself failed."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 error_message: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code
        self.error_message = error_message
