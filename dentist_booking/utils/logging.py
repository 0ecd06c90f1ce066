"""
Logger factory shared by every module.
"""

import logging
import sys
from typing import Optional

from ..config import get_settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Install one stream handler on the ``dentist`` logger tree."""
    global _configured
    root = logging.getLogger("dentist")
    root.setLevel((level or get_settings().log_level).upper())
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``dentist`` namespace, e.g. ``dentist.backend``."""
    if not _configured:
        configure_logging()
    return logging.getLogger(name)
