"""
Reservation form and booking create/edit/cancel actions.
"""

from datetime import datetime
from typing import Optional, Union

from ...core.exceptions import BackendAPIError, BookingValidationError
from ...core.models import Booking, Outcome, Session
from ...utils.date import parse_iso
from ...utils.effects import EffectScope, ScopedFlow
from ...utils.logging import get_logger
from ..backend import BackendClient

logger = get_logger("dentist.reservation")


class ReservationForm:
    """Dentist selector + date-time picker, shared by create and edit."""

    def __init__(self, dentist_id: Optional[str] = None, booking_date: Optional[datetime] = None):
        self.dentist_id = dentist_id or None
        self.booking_date = booking_date

    @classmethod
    def from_booking(cls, booking: Booking) -> "ReservationForm":
        return cls(dentist_id=booking.dentist_id, booking_date=booking.booking_date)

    def set_dentist(self, dentist_id: Optional[str]) -> None:
        self.dentist_id = dentist_id or None

    def set_date(self, value: Union[datetime, str, None]) -> None:
        if isinstance(value, str):
            value = parse_iso(value) if value.strip() else None
        self.booking_date = value

    def validate(self) -> None:
        """Raise BookingValidationError unless both fields are filled."""
        if not self.dentist_id or self.booking_date is None:
            raise BookingValidationError("Please select a dentist and appointment date.")


class ReservationService(ScopedFlow):
    """Submit the reservation form against the booking endpoints."""

    LOGIN_REQUIRED = "You must be logged in to make a booking."
    CREATED = "Booking successful!"
    BANNED = "Failed to create booking. You got banned"
    ALREADY_BOOKED = "Failed to create booking. You already have a booking!"
    EDITED = "Booking Edited!"
    EDIT_FAILED = "Failed to edit booking."
    LOAD_FAILED = "Failed to load booking data"
    CANCELLED = "Booking cancelled."
    CANCEL_FAILED = "Failed to cancel booking."
    DELETED = "Booking deleted."
    DELETE_FAILED = "Failed to delete booking."

    def __init__(
        self,
        client: BackendClient,
        session: Optional[Session],
        scope: Optional[EffectScope] = None,
    ):
        super().__init__(scope, name="reservation")
        self.client = client
        self.session = session
        self.loading = False

    async def _is_banned(self) -> bool:
        """Look up the session user's role after a failed create."""
        if not self.session:
            return False
        if self.session.user_id:
            lookup = self.client.get_user(self.session.token, self.session.user_id)
        else:
            lookup = self.client.get_current_user(self.session.token)
        result = await self._call(lookup)
        if result is None or not result.is_ok:
            return False
        return result.value.is_banned

    async def create(self, form: ReservationForm) -> Outcome:
        """Create a booking from the form."""
        try:
            form.validate()
        except BookingValidationError as e:
            return Outcome(success=False, message=str(e))
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)

        self.loading = True
        try:
            result = await self._call(
                self.client.create_booking(form.dentist_id, self.session.token, form.booking_date)
            )
            if result is not None and result.is_ok:
                logger.info(f"booking created with dentist {form.dentist_id}")
                return Outcome(success=True, message=self.CREATED, data=result.value)

            if await self._is_banned():
                return Outcome(success=False, message=self.BANNED)
            return Outcome(success=False, message=self.ALREADY_BOOKED)
        finally:
            self.loading = False

    async def load_for_edit(self, booking_id: str) -> Outcome:
        """Fetch a booking and prefill a form with it."""
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)
        try:
            result = await self._call(self.client.get_booking(booking_id, self.session.token))
            booking = result.unwrap() if result is not None else None
        except BackendAPIError as e:
            logger.error(f"loading booking {booking_id} failed: {e}")
            return Outcome(success=False, message=self.LOAD_FAILED)
        if booking is None:
            return Outcome(success=False, message=self.LOAD_FAILED)
        return Outcome(success=True, message="", data=ReservationForm.from_booking(booking))

    async def edit(self, booking_id: str, form: ReservationForm) -> Outcome:
        """Move an existing booking to the form's dentist and date."""
        try:
            form.validate()
        except BookingValidationError as e:
            return Outcome(success=False, message=str(e))
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)

        self.loading = True
        try:
            result = await self._call(
                self.client.update_booking(
                    booking_id, self.session.token, form.booking_date, form.dentist_id
                )
            )
        finally:
            self.loading = False

        if result is None or not result.is_ok:
            return Outcome(success=False, message=self.EDIT_FAILED)
        return Outcome(success=True, message=self.EDITED, data=result.value)

    async def cancel(self, booking_id: str) -> Outcome:
        """Mark a booking cancelled."""
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)
        result = await self._call(self.client.cancel_booking(booking_id, self.session.token))
        if result is None or not result.is_ok:
            return Outcome(success=False, message=self.CANCEL_FAILED)
        return Outcome(success=True, message=self.CANCELLED, data=result.value)

    async def delete(self, booking_id: str) -> Outcome:
        """Delete a booking (admin)."""
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)
        result = await self._call(self.client.delete_booking(booking_id, self.session.token))
        if result is None or not result.is_ok:
            return Outcome(success=False, message=self.DELETE_FAILED)
        return Outcome(success=True, message=self.DELETED, data=result.value)
