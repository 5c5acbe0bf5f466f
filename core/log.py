"""Application logger backed by a rotating file."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from core.settings import LOG_PATH

ROOT_LOGGER = "timesheets"


def _ensure_root_logger() -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(LOG_PATH, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``timesheets`` or one of its children, e.g. ``get_logger("service")``."""
    root = _ensure_root_logger()
    if not name:
        return root
    return root.getChild(name)


__all__ = ["get_logger", "ROOT_LOGGER"]
