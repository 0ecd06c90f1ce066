"""
Appointment confirmation from an emailed, unauthenticated link.
"""

from typing import Optional

from ...core.enums import BookingStatus, ConfirmationState
from ...core.models import Booking
from ...utils.effects import EffectScope, ScopedFlow
from ...utils.logging import get_logger
from ..backend import BackendClient

logger = get_logger("dentist.confirm")


class ConfirmationFlow(ScopedFlow):
    """
    Show one booking and let the patient confirm it.

    State machine of the confirm action: idle -> loading -> success | error.
    ``loading`` and ``success`` disable the button; ``error`` allows a retry.
    On success the local status is set to confirmed without re-fetching.
    """

    LOAD_ERROR = "Could not load booking details. The link may be invalid or expired."
    CONFIRMED_MESSAGE = "This appointment has been confirmed."
    PROMPT_MESSAGE = "Please confirm your appointment by clicking the button below."
    DEFAULT_ERROR = "An error occurred while confirming your appointment"

    def __init__(self, client: BackendClient, booking_id: str, scope: Optional[EffectScope] = None):
        super().__init__(scope, name="confirm")
        self.client = client
        self.booking_id = booking_id

        self.booking: Optional[Booking] = None
        self.loading = True
        self.load_error: Optional[str] = None
        self.state = ConfirmationState.IDLE
        self.error: Optional[str] = None

    async def load(self) -> bool:
        result = await self._call(self.client.get_booking(self.booking_id))
        if result is None:
            return False
        self.loading = False
        if not result.is_ok:
            logger.error(f"confirm: booking {self.booking_id} failed to load: {result.message}")
            self.load_error = self.LOAD_ERROR
            return False

        self.booking = result.value
        if self.booking.status == BookingStatus.CONFIRMED:
            self.state = ConfirmationState.SUCCESS
        return True

    @property
    def can_confirm(self) -> bool:
        return self.booking is not None and self.state in (
            ConfirmationState.IDLE,
            ConfirmationState.ERROR,
        )

    @property
    def message(self) -> str:
        if self.booking is not None and self.booking.status == BookingStatus.CONFIRMED:
            return self.CONFIRMED_MESSAGE
        return self.PROMPT_MESSAGE

    async def confirm(self) -> bool:
        """Confirm the booking; no request is made unless the button is enabled."""
        if not self.can_confirm:
            return self.state == ConfirmationState.SUCCESS

        self.state = ConfirmationState.LOADING
        self.error = None
        result = await self._call(self.client.confirm_booking(self.booking_id))
        if result is None:
            return False

        if not result.is_ok:
            logger.warning(f"confirm: booking {self.booking_id} not confirmed: {result.message}")
            self.state = ConfirmationState.ERROR
            self.error = result.message or self.DEFAULT_ERROR
            return False

        logger.info(f"confirm: booking {self.booking_id} confirmed")
        self.state = ConfirmationState.SUCCESS
        self.booking = self.booking.model_copy(update={"status": BookingStatus.CONFIRMED})
        return True
