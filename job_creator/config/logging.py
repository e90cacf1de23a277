"""Process-wide logging setup and structured event helper."""

from __future__ import annotations

import json
import logging
from typing import Any

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def config_configure_logging(log_level: str) -> None:
    """Configure root logging once for runtime entrypoints.

    Args:
        log_level: Logging level name such as `INFO`.

    Returns:
        None: Logging is configured as a side effect.

    Raises:
        ValueError: Raised when the level name is unknown to `logging`.
    """

    logging.basicConfig(level=log_level.upper(), format=_LOG_FORMAT)


def config_log_event(logger: logging.Logger, event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit one JSON event line with deterministic key order.

    Args:
        logger: Target logger.
        event: Event name.
        level: Logging level for the record.
        fields: Structured event fields.

    Returns:
        None: Record is emitted as a side effect.

    Raises:
        TypeError: Raised when a field value is not JSON serializable.
    """

    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, sort_keys=True, default=str))
