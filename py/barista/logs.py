"""Logging setup.

barista logs through loguru and stays silent by default: the package
disables its own logger on import. configure_logging() opts in.
"""

import sys
from typing import Any, Dict, Optional

from loguru import logger

from barista.config import BaristaConfig


_state: Dict[str, Any] = {"handler_id": None, "trace_dispatch": False}


def configure_logging(config: Optional[BaristaConfig] = None, sink: Any = None) -> int:
    """Enable barista's logger with one sink; returns the loguru handler id.

    Calling it again replaces the sink added by the previous call.
    """
    config = config or BaristaConfig()
    _remove_handler()
    handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        level=config.log_level,
        format=config.log_format,
        filter="barista",
    )
    logger.enable("barista")
    _state["handler_id"] = handler_id
    _state["trace_dispatch"] = config.trace_dispatch
    logger.debug("barista logging configured at {}", config.log_level)
    return handler_id


def disable_logging() -> None:
    """Undo configure_logging."""
    _remove_handler()
    _state["trace_dispatch"] = False
    logger.disable("barista")


def dispatch_tracing() -> bool:
    return _state["trace_dispatch"]


def _remove_handler() -> None:
    handler_id = _state["handler_id"]
    _state["handler_id"] = None
    if handler_id is None:
        return
    try:
        logger.remove(handler_id)
    except ValueError:
        # already removed by the host application
        pass
