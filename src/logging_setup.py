from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


LOG_DIR = Path("./data/logs")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_LOG_FILE_NAME = "graphql_checklist.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_CONFIGURED_FLAG = "_checklist_logging_configured"


def _handlers(level: int) -> list[logging.Handler]:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(LOG_DIR / _LOG_FILE_NAME, maxBytes=_MAX_LOG_BYTES, backupCount=_BACKUP_COUNT),
    ]
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(debug: bool = False) -> None:
    """Route all loggers to stdout and a rotating file in ``LOG_DIR``.

    Calling it again only adjusts the level, so the NiceGUI reload worker
    does not stack handlers.
    """
    level = logging.DEBUG if debug else logging.INFO
    root_logger = logging.getLogger()
    if not getattr(root_logger, _CONFIGURED_FLAG, False):
        root_logger.handlers.clear()
        for handler in _handlers(level):
            root_logger.addHandler(handler)
        setattr(root_logger, _CONFIGURED_FLAG, True)

    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)
    # httpx reports every request at INFO; only show that while debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
