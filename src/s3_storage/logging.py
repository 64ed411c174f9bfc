"""Structured logging configuration for the S3 storage library."""

import json
import logging
import sys
from typing import Any

from .constants import COMPONENT
from .utils.context import get_context_dict
from .utils.errors import sanitize_dict


def setup_structured_logging(level: int = logging.INFO) -> None:
    """Configure structured JSON logging."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def log_transfer_event(
    logger: logging.Logger,
    operation: str,
    transfer_id: str,
    key: str | None,
    event: str,
    message: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """Log a structured transfer event."""
    log_data = get_context_dict({
        "component": COMPONENT,
        "operation": operation,
        "transfer_id": transfer_id,
        "key": key,
        "event": event,
        "message": message,
    })
    log_data.update(kwargs)
    logger.log(level, json.dumps(sanitize_dict(log_data), default=str))
