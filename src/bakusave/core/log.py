"""Logging helpers shared across the package."""
from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "bakusave"


def _library_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(handler, logging.NullHandler) for handler in root.handlers):
        root.addHandler(logging.NullHandler())
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger under the package namespace.

    Output stays silent until the host application configures logging;
    the package root only carries a NullHandler.
    """
    root = _library_root()
    if not name or name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["ROOT_LOGGER_NAME", "get_logger"]
