# ==================================
# 📁 affectiq/shared/app_logger.py
# ==================================
import logging
import os
import sys
from typing import Dict, Optional

SERVICE_NAME = "affectiq"
LOG_FORMAT = f"%(asctime)s - %(levelname)-8s - [{SERVICE_NAME}] - %(name)s - %(message)s"

_loggers: Dict[str, logging.Logger] = {}


def _level_from_env(default: str = "INFO") -> int:
    return getattr(logging, os.getenv("LOG_LEVEL", default).upper(), logging.INFO)


def configure_logging(verbose: bool = False, level: Optional[int] = None) -> logging.Logger:
    """
    Configures the package root logger to write to stderr.
    stdout is left alone so it can carry the JSON result.
    """
    root_logger = logging.getLogger(SERVICE_NAME)
    effective = logging.DEBUG if verbose else (level if level is not None else _level_from_env())
    root_logger.setLevel(effective)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
        root_logger.propagate = False

    for handler in root_logger.handlers:
        handler.setLevel(effective)
    return root_logger


def get_app_logger(name: str) -> logging.Logger:
    """Returns a cached logger under the package namespace."""
    full_name = name if name == SERVICE_NAME or name.startswith(f"{SERVICE_NAME}.") else f"{SERVICE_NAME}.{name}"
    if full_name not in _loggers:
        _loggers[full_name] = logging.getLogger(full_name)
    return _loggers[full_name]
