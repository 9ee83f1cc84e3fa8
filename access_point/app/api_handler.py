# =============================================================================
# API Gateway Handler
# =============================================================================
# Entry point for API Gateway requests.
# Parses the body, publishes one event to the access point bus and answers
# with a fixed message. Every failure becomes the same generic 500; details
# only go to the logs.
# =============================================================================

import json
import logging
from typing import Any, Dict, Optional

from access_point.runtime.config import RelayConfig
from access_point.runtime.cors import cors_headers
from access_point.runtime.deps import Deps, get_deps
from access_point.runtime.normalizer import normalize
from access_point.runtime.parse_event import parse_event

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Evento enviado"
ERROR_MESSAGE = "some error happened"


def api_response(body: Dict[str, Any], status_code: int = 200,
                 config: Optional[RelayConfig] = None) -> Dict[str, Any]:
    """Format response for API Gateway proxy integrations."""
    if config is not None:
        headers = cors_headers(config.stage, config.cors_origins)
    else:
        headers = cors_headers()

    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(body, ensure_ascii=False),
    }


def _loaded_config(deps: Deps) -> Optional[RelayConfig]:
    """Config for error responses; None when it cannot be loaded."""
    try:
        return deps.config
    except Exception:
        # already logged by lambda_handler
        return None


def lambda_handler(event: Any, context: Any, deps: Optional[Deps] = None) -> Dict[str, Any]:
    """
    API Gateway entry point.

    Args:
        event: API Gateway proxy event (or a direct invoke payload)
        context: Lambda context
        deps: Dependency container, the process-wide one when omitted

    Returns:
        200 {"message": "Evento enviado"} once EventBridge accepted the event,
        500 {"message": "some error happened"} otherwise
    """
    if deps is None:
        deps = get_deps()

    try:
        config = deps.config
        logging.getLogger().setLevel(config.log_level)

        request = parse_event(event)
        logger.info(
            f"Handling request_id={request.request_id} source={request.source} "
            f"has_body={request.has_body} metadata={request.metadata}"
        )

        detail = normalize(request.body)
        result = deps.publisher.publish(detail)
        logger.debug(f"Published envelope: {result.envelope.to_dict()}")

        logger.info(f"Relayed request_id={request.request_id} event_id={result.event_id}")
        return api_response({"message": SUCCESS_MESSAGE}, 200, config)

    except Exception as e:
        logger.exception(f"Error relaying request to EventBridge: {e}")
        return api_response({"message": ERROR_MESSAGE}, 500, _loaded_config(deps))


handler = lambda_handler
