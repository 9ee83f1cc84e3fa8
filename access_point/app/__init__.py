# =============================================================================
# Application Entry Points
# =============================================================================
# Thin transport adapter that parses the event and runs the relay.
# =============================================================================

from access_point.app.api_handler import handler, lambda_handler

__all__ = [
    "handler",
    "lambda_handler",
]
