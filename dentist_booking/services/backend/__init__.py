"""
Backend REST API client.
"""

from .client import BackendClient

__all__ = ["BackendClient"]
