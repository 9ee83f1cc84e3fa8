# =============================================================================
# CORS Headers
# =============================================================================
# Every API Gateway response carries CORS headers. The allowed origin is
# configured per stage (CORS_ORIGINS_JSON); stages without an entry allow "*".
# =============================================================================

from typing import Dict, Mapping, Optional

ALLOW_HEADERS = "Content-Type,Authorization,X-Api-Key"
ALLOW_METHODS = "POST,OPTIONS"


def cors_headers(stage: Optional[str] = None, origins: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Response headers for the given stage."""
    origin = (origins or {}).get(stage or "", "*")

    headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
    }
    # Browsers reject credentials with a wildcard origin
    if origin != "*":
        headers["Access-Control-Allow-Credentials"] = "true"
        headers["Vary"] = "Origin"
    return headers
