"""Runtime-configurable debug logging utilities."""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Dict

_logger = logging.getLogger("rosa")
_state_lock = threading.Lock()
_enabled = False


def configure_root(level: int = logging.WARNING) -> None:
    """Ensure standard logging configuration is present."""

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


def is_enabled() -> bool:
    """Return whether verbose debug logging is active."""

    with _state_lock:
        return _enabled


def enable() -> None:
    """Enable verbose logging globally."""

    global _enabled
    with _state_lock:
        _enabled = True
    configure_root()
    _logger.setLevel(logging.DEBUG)
    _logger.debug("Verbose debug mode enabled")


def disable() -> None:
    """Disable verbose logging globally."""

    global _enabled
    with _state_lock:
        _enabled = False
    _logger.setLevel(logging.WARNING)


def _normalise(payload: Any) -> str:
    try:
        return json.dumps(payload, separators=(",", ":"))
    except TypeError:
        return str(payload)


def log_request(context: str, payload: Dict[str, Any]) -> None:
    """Emit structured debug log for outgoing requests."""

    if not is_enabled():
        return
    logging.getLogger("rosa.request").debug(
        "%s request: %s", context, _normalise(payload)
    )


def log_response(context: str, payload: Any) -> None:
    """Emit structured debug log for responses."""

    if not is_enabled():
        return
    logging.getLogger("rosa.response").debug(
        "%s response: %s", context, _normalise(payload)
    )
