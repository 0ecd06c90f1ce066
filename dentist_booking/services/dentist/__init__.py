"""
Dentist catalog, comparison, profile editing and schedule actions.
"""

from .catalog import DentistCatalogPipeline
from .comparison import ComparisonSummary, ComparisonView
from .profile import MAX_BIO_LENGTH, ProfileEditFlow, ProfileForm
from .schedule import DentistDetailView, DentistScheduleService

__all__ = [
    "DentistCatalogPipeline",
    "ComparisonSummary",
    "ComparisonView",
    "MAX_BIO_LENGTH",
    "ProfileEditFlow",
    "ProfileForm",
    "DentistDetailView",
    "DentistScheduleService",
]
