"""Logging configuration for mb-clip."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_path: Path, level: str = "DEBUG") -> None:
    """Send ``mb_clip`` log records to a rotating file.

    Only the first call per process attaches a handler; the library itself never configures logging.
    """
    package_logger = logging.getLogger("mb_clip")
    if package_logger.handlers:
        return

    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))

    package_logger.setLevel(level)
    package_logger.addHandler(handler)
