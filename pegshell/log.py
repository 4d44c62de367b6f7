"""Logger factory for pegshell."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "PEGSHELL_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER = "pegshell"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a logger under the ``pegshell`` namespace.

    The root ``pegshell`` logger gets a stderr handler the first time any
    logger is requested; its level comes from ``PEGSHELL_LOG_LEVEL``.
    """

    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_level(level: int) -> None:
    get_logger().setLevel(level)


__all__ = ["get_logger", "set_level", "LOG_LEVEL_ENV"]
