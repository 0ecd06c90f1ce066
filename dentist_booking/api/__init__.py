"""
API layer for the dentist booking client.
"""

from .app import create_app
from .middleware import LoggingMiddleware

__all__ = [
    "create_app",
    "LoggingMiddleware",
]
