"""
Booking-related enums.
"""

from enum import Enum


class BookingStatus(str, Enum):
    """Booking status as reported by the backend."""

    UPCOMING = "upcoming"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    BLOCKED = "blocked"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value) -> "BookingStatus":
        """Convert a raw backend status to BookingStatus, falling back to UNKNOWN."""
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            return cls.UNKNOWN

        value = value.strip().lower()
        # Some records spell it the American way
        if value == "canceled":
            return cls.CANCELLED

        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN


class SortOrder(str, Enum):
    """Booking date sort order."""

    ASC = "asc"
    DESC = "desc"


class ConfirmationState(str, Enum):
    """States of the booking confirmation action."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
