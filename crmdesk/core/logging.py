from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

HANDLER_NAME = "crmdesk"
LOG_FORMAT = "%(levelname)s %(name)s %(message)s %(asctime)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single JSON stream handler to the root logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just adjust the level.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JsonFormatter(LOG_FORMAT))
    root.addHandler(handler)
