"""
Booking confirmation flow.
"""

from .flow import ConfirmationFlow

__all__ = ["ConfirmationFlow"]
