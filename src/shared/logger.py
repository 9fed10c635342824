"""
Request-scoped logging for the HTTP functions.

Every record written during an invocation carries the request ID twice:
as a `[<id>]` message prefix for the host console, and as the
`request_id` extra so Application Insights stores it as a custom dimension.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional
from shared.config import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CorrelatedLogger(logging.LoggerAdapter):
    """
    Adapter binding one request ID to a module logger.

    Usage:
        log = CorrelatedLogger(logging.getLogger(__name__), request_id)
        log.info("Processed science report")
    """

    def __init__(self, logger: logging.Logger, correlation_id: str):
        super().__init__(logger, {"request_id": correlation_id})
        self.correlation_id = correlation_id

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return f"[{self.correlation_id}] {msg}", kwargs


def get_logger(name: str, correlation_id: str, level: Optional[str] = None) -> CorrelatedLogger:
    """
    Get a request-scoped logger.

    On first use the module logger gets a stdout handler at the LOG_LEVEL
    setting; an explicit `level` overrides it.

    Args:
        name: Logger name (use __name__ for current module)
        correlation_id: Host invocation ID or generated ULID
        level: Optional level name, e.g. "DEBUG"

    Example:
        >>> log = get_logger(__name__, request_id)
        >>> log.info("Processed science report")
        [01JCK3Q7H8ZVXN3BARC9GWAEZM] Processed science report
    """
    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level.upper())
    elif not logger.handlers:
        logger.setLevel(config.log_level)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return CorrelatedLogger(logger, correlation_id)
