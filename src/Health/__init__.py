"""
Health check endpoint for monitoring and CI/CD smoke tests.

Returns minimal system status to avoid information disclosure:
- status: healthy/degraded/unhealthy
- timestamp: ISO 8601 UTC timestamp

Missing configuration keys are logged server-side for troubleshooting
but not exposed in the public response.
"""

import json
import logging
import azure.functions as func
from shared.config import config
from shared.models import HealthStatus
from shared.ulid_generator import utc_now_iso

logger = logging.getLogger(__name__)


def _check_config() -> tuple[bool, list[str]]:
    """
    Validate required configuration.

    Returns:
        tuple: (is_healthy, list of missing config keys)
    """
    missing = config.validate_required()
    if missing:
        logger.error(f"Config validation failed in {config.environment} environment: missing {missing}")
        return False, missing
    return True, []


def main(req: func.HttpRequest) -> func.HttpResponse:
    """
    Health check endpoint.

    Returns 200 when YIELD_SCIENCE is loaded, 503 otherwise.
    """
    try:
        config_ok, _ = _check_config()

        response = HealthStatus(
            status="healthy" if config_ok else "degraded",
            timestamp=utc_now_iso(),
        )

        return func.HttpResponse(
            json.dumps(response.model_dump(), indent=2),
            status_code=200 if config_ok else 503,
            mimetype="application/json",
        )

    except Exception as e:
        # Log full error server-side, return minimal response publicly
        logger.error(f"Health check failed: {e}")
        return func.HttpResponse(
            json.dumps(HealthStatus(status="unhealthy", timestamp=utc_now_iso()).model_dump()),
            status_code=503,
            mimetype="application/json",
        )
