"""
Service layer for the dentist booking client.
"""

from .backend import BackendClient
from .booking import BookingHistoryPipeline, ReservationForm, ReservationService, ReviewForm
from .confirmation import ConfirmationFlow
from .dentist import (
    ComparisonView,
    DentistCatalogPipeline,
    DentistDetailView,
    DentistScheduleService,
    ProfileEditFlow,
)
from .user import UserDirectory, UserRoleEditor

__all__ = [
    "BackendClient",
    "BookingHistoryPipeline",
    "ReservationForm",
    "ReservationService",
    "ReviewForm",
    "ConfirmationFlow",
    "ComparisonView",
    "DentistCatalogPipeline",
    "DentistDetailView",
    "DentistScheduleService",
    "ProfileEditFlow",
    "UserDirectory",
    "UserRoleEditor",
]
