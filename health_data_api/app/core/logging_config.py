"""
Logging configuration for the health data server.

Two pieces share one format and level:

* ``setup_logging`` attaches handlers to the ``health_data_api``
  package logger, so application messages are formatted the same
  whether the app runs under uvicorn, under the test client or from a
  script.  The root logger is left alone.
* ``uvicorn_log_config`` derives a ``logging.config.dictConfig``
  mapping from uvicorn's default so that the server's own startup and
  access lines use the application's timestamped format and level.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from uvicorn.config import LOGGING_CONFIG

APP_LOGGER = "health_data_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ACCESS_LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(client_addr)s - "%(request_line)s" %(status_code)s'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_name(level: str) -> str:
    """Normalise a level name; unknown names fall back to ``INFO``."""
    name = level.upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the application logger once and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file that receives a copy of every message.

    Repeated calls, for example from tests that build many
    applications, leave the first configuration in place.
    """
    logger = logging.getLogger(APP_LOGGER)
    if logger.handlers:
        return logger

    logger.setLevel(_level_name(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger


def uvicorn_log_config(level: str = "INFO") -> Dict[str, Any]:
    """Return uvicorn's logging config rewritten to the application format."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["formatters"]["default"].update(fmt=LOG_FORMAT, datefmt=DATE_FORMAT, use_colors=False)
    config["formatters"]["access"].update(fmt=ACCESS_LOG_FORMAT, datefmt=DATE_FORMAT, use_colors=False)
    for logger_config in config["loggers"].values():
        logger_config["level"] = _level_name(level)
    return config
