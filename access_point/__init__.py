# =============================================================================
# Access Point Event Relay
# =============================================================================
# API Gateway -> EventBridge relay for the access point bus.
# =============================================================================

__version__ = "1.0.0"
