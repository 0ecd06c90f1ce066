"""
Custom exceptions for the dentist booking client.
"""

from .backend import BackendAPIError
from .booking import BookingFlowError, BookingValidationError
from .profile import ProfileAccessError, ProfileValidationError

__all__ = [
    "BackendAPIError",
    "BookingFlowError",
    "BookingValidationError",
    "ProfileAccessError",
    "ProfileValidationError",
]
