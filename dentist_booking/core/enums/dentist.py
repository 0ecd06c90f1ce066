"""
Dentist-related enums and tag vocabulary.
"""

from enum import Enum
from typing import List


class PriceSort(str, Enum):
    """Price sort toggle of the dentist catalog."""

    NONE = "none"
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "PriceSort":
        """Two-way toggle; the first toggle from NONE sorts ascending."""
        return PriceSort.DESC if self == PriceSort.ASC else PriceSort.ASC


EXPERTISE_OPTIONS: List[str] = [
    "Orthodontics",
    "Endodontics",
    "Prosthodontics",
    "Pediatric Dentistry",
    "Oral Surgery",
    "Periodontics",
    "Cosmetic Dentistry",
    "General Dentistry",
    "Implant Dentistry",
]

ALL_EXPERTISE = "All"
