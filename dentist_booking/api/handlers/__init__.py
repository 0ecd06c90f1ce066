"""
HTTP handlers.
"""

from .health import HealthHandler
from .dentists import DentistHandler
from .bookings import BookingHandler
from .confirmation import ConfirmationHandler

__all__ = [
    "HealthHandler",
    "DentistHandler",
    "BookingHandler",
    "ConfirmationHandler",
]
