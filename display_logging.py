"""Console logging for the display engine's ``display.*`` loggers."""
from __future__ import annotations

import logging
import os
from typing import Any, Optional, Tuple

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

PROJECT_LOGGERS = ("display",)

_configured = False


def _coerce_level(level: Optional[Any]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        numeric = getattr(logging, level.strip().upper(), None)
        if isinstance(numeric, int):
            return numeric
    env_default = os.environ.get("TXN_LOG_LEVEL", "INFO").strip().upper()
    return getattr(logging, env_default, logging.INFO)


def _read_settings(logging_settings: Optional[Any]) -> Tuple[Any, Any, Any]:
    if logging_settings is None:
        return None, None, None
    if isinstance(logging_settings, dict):
        get = logging_settings.get
    else:
        def get(name):
            return getattr(logging_settings, name, None)
    return get("level"), get("format"), get("datefmt")


def configure(logging_settings: Optional[Any] = None, *, force: bool = True) -> None:
    """
    Install a single console handler and set the ``display`` logger level.

    ``logging_settings`` is a ``config.LoggingSettings`` or a dict with the
    same keys. Missing values fall back to the ``TXN_LOG_*`` variables.
    """
    global _configured
    if _configured and not force:
        return

    level, fmt, datefmt = _read_settings(logging_settings)
    level = _coerce_level(level)
    fmt = fmt or os.environ.get("TXN_LOG_FORMAT", _DEFAULT_FORMAT)
    datefmt = datefmt or os.environ.get("TXN_LOG_DATEFMT", _DEFAULT_DATEFMT)

    root_logger = logging.getLogger()
    root_logger.setLevel(max(logging.WARNING, level))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt, datefmt))
    root_logger.addHandler(console_handler)

    for name in PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(level)

    logging.captureWarnings(True)
    _configured = True
