"""
Enums for the dentist booking client.
"""

from .booking import BookingStatus, SortOrder, ConfirmationState
from .dentist import PriceSort, EXPERTISE_OPTIONS, ALL_EXPERTISE
from .user import UserRole
from .error import ErrorCode

__all__ = [
    "BookingStatus",
    "SortOrder",
    "ConfirmationState",
    "PriceSort",
    "EXPERTISE_OPTIONS",
    "ALL_EXPERTISE",
    "UserRole",
    "ErrorCode",
]
