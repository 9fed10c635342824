"""
SampleTrigger HTTP function - Return the current science report.

GET /api/sample responds with:
- scienceReport: sentence derived from the YIELD_SCIENCE setting
- timeStamp: ISO 8601 time the response was built (with UTC offset)

YIELD_SCIENCE is loaded once per process. If it is missing or not an
integer, every request gets the same 500 error and no report is built.
"""

import json
import logging
from datetime import datetime
from typing import Callable, Optional
import azure.functions as func
from shared.config import ScienceConfigSource, config
from shared.logger import get_logger
from shared.models import ErrorResponse, ScienceReport
from shared.report import report
from shared.ulid_generator import generate_ulid, utc_now

logger = logging.getLogger(__name__)


def _json_response(body: dict, status_code: int, request_id: str) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body),
        status_code=status_code,
        mimetype="application/json",
        headers={"X-Request-ID": request_id},
    )


def handle_sample(
    req: func.HttpRequest,
    source: ScienceConfigSource,
    clock: Callable[[], datetime] = utc_now,
    request_id: Optional[str] = None,
) -> func.HttpResponse:
    """
    Build the science report response from an injected configuration source.

    Args:
        req: Incoming HTTP request (no parameters are read)
        source: Load-once configuration handle
        clock: Returns the current timezone-aware time
        request_id: Correlation ID (default: new ULID)

    Returns:
        200 with the report, or 500 naming the missing setting
    """
    request_id = request_id or generate_ulid()
    log = get_logger(__name__, request_id)

    try:
        result = source.get()
        if not result.ok:
            log.error(f"Refusing request: {result.error.message}")
            error = ErrorResponse(
                error="Configuration Error",
                message=result.error.message,
                setting=result.error.setting,
            )
            return _json_response(error.model_dump(), 500, request_id)

        body = ScienceReport(
            science_report=report(result.settings.yield_science),
            time_stamp=clock(),
        )
        log.info("Python HTTP trigger function processed a request.")
        return _json_response(body.model_dump(by_alias=True), 200, request_id)

    except Exception as e:
        # Log full error server-side, return minimal response publicly
        log.exception(f"Science report failed: {e}")
        error = ErrorResponse(error="Internal Server Error", message="Failed to build science report")
        return _json_response(error.model_dump(exclude_none=True), 500, request_id)


def main(req: func.HttpRequest, context: Optional[func.Context] = None) -> func.HttpResponse:
    """Host entry point: serve the report from the process-wide configuration."""
    request_id = context.invocation_id if context is not None else None
    return handle_sample(req, config.science, request_id=request_id)
