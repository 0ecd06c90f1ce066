"""
Booking model.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Union
from pydantic import AliasChoices, Field, field_validator

from ..enums import BookingStatus
from .common import BackendModel
from .dentist import Dentist
from .user import User


class Booking(BackendModel):
    """Appointment linking a user and a dentist at a date/time."""

    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    booking_date: datetime = Field(
        validation_alias=AliasChoices("bookingDate", "booking_date")
    )
    user: Union[User, str, None] = None
    dentist: Union[Dentist, str, None] = None
    status: BookingStatus = BookingStatus.UPCOMING
    treatment_detail: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("treatmentDetail", "treatment_detail")
    )
    created_at: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("createdAt", "created_at")
    )

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> BookingStatus:
        return BookingStatus.from_value(value)

    @field_validator("booking_date", "created_at")
    @classmethod
    def _aware(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Naive timestamps from the backend are UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def dentist_id(self) -> Optional[str]:
        if isinstance(self.dentist, Dentist):
            return self.dentist.id
        return self.dentist

    @property
    def dentist_name(self) -> str:
        if isinstance(self.dentist, Dentist):
            return self.dentist.name
        return ""

    @property
    def user_id(self) -> Optional[str]:
        if isinstance(self.user, User):
            return self.user.id
        return self.user

    def is_reviewable(self) -> bool:
        """Only completed appointments can be reviewed."""
        return self.status == BookingStatus.COMPLETED
