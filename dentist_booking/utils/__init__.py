"""
Utility modules for the dentist booking client.
"""

from .date import DateParser, parse_iso, to_iso_utc
from .effects import EffectScope, ScopedFlow
from .logging import configure_logging, get_logger

__all__ = [
    "DateParser",
    "parse_iso",
    "to_iso_utc",
    "EffectScope",
    "ScopedFlow",
    "configure_logging",
    "get_logger",
]
