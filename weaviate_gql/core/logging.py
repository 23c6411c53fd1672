"""
Package logging.

Every module logs through a child of the ``weaviate_gql`` logger.  The
package only installs a ``NullHandler``, so nothing is printed until the
application either configures logging itself or calls
``configure_logging()``.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from weaviate_gql.core.config import get_settings

PACKAGE_LOGGER = "weaviate_gql"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_root = logging.getLogger(PACKAGE_LOGGER)
_root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Logger for *name*, nested under the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single pipe-formatted stream handler to the package logger.

    *level* defaults to ``LOG_LEVEL`` from settings.  Calling this again
    replaces the handler instead of adding another one.
    """
    level_name = (level or get_settings().log_level).upper()

    for handler in list(_root.handlers):
        if getattr(handler, "_weaviate_gql", False):
            _root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    handler._weaviate_gql = True  # type: ignore[attr-defined]
    _root.addHandler(handler)
    _root.setLevel(getattr(logging, level_name, logging.INFO))
    return _root
