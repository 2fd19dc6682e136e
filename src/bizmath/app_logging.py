"""Shared logging utilities for bizmath."""
from __future__ import annotations

import logging

LOGGER_NAME = "bizmath"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the shared library logger, or a child of it when ``name`` is given."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
