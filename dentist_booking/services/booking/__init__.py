"""
Booking history, reservations and reviews.
"""

from .history import BookingHistoryPipeline, HistoryPage
from .reservation import ReservationForm, ReservationService
from .review import ReviewForm

__all__ = [
    "BookingHistoryPipeline",
    "HistoryPage",
    "ReservationForm",
    "ReservationService",
    "ReviewForm",
]
