# === FILE: site_rag/logger.py ===
"""Logging setup for **SiteRAG**.

One named logger, ``"SiteRAG"``, is shared by the crawler, the retrieval
pipeline and the CLI::

    from site_rag.logger import logger
    logger.info("Ingesting %s", url)

Modules that prefer ``logging.getLogger(LOGGER_NAME)`` get the same object.
:func:`configure` swaps handlers at runtime (the CLI calls it with the
``--log-*`` options). The HTTP clients under the Cohere and Chroma SDKs log
every request at INFO; they are held at WARNING unless the project logger
runs at DEBUG.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteRAG"

_NOISY_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore", "chromadb", "aiohttp.access")
_LOG_FILE_BYTES: Final[int] = 5 * 1024 * 1024

_LevelT = Union[int, str]


def _handlers(fmt: str, log_file: str | Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=_LOG_FILE_BYTES, backupCount=3, encoding="utf-8")
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Optional path of a rotating log file, in addition to stdout.
    log_format
        Format string for :class:`logging.Formatter`.
    replace_handlers
        *True* – drop existing handlers first; *False* – append.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    if replace_handlers:
        lg.handlers.clear()
    for handler in _handlers(log_format, log_file):
        lg.addHandler(handler)
    lg.propagate = False

    library_level = logging.DEBUG if lg.level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Shortcut used by the CLI: replace handlers and return the logger."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
