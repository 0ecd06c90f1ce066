"""
Core data models for the dentist booking client.
"""

from .result import ApiResult, Ok, Err
from .dentist import Dentist, Review, ReviewSubmission, normalize_expertise
from .user import User, Session
from .booking import Booking
from .outcome import Outcome

__all__ = [
    "ApiResult",
    "Ok",
    "Err",
    "Dentist",
    "Review",
    "ReviewSubmission",
    "normalize_expertise",
    "User",
    "Session",
    "Booking",
    "Outcome",
]
