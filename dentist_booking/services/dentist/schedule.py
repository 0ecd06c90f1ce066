"""
Dentist-side schedule actions and the dentist detail view.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from ...core.exceptions import BackendAPIError
from ...core.models import Booking, Dentist, Outcome, Review, Session
from ...utils.date import parse_iso
from ...utils.effects import EffectScope, ScopedFlow
from ...utils.logging import get_logger
from ..backend import BackendClient

logger = get_logger("dentist.schedule")


def _slot_time(item: Any) -> Optional[datetime]:
    """Accept a bare ISO string or a booking-like dict."""
    if isinstance(item, dict):
        item = item.get("bookingDate") or item.get("booking_date")
    if not isinstance(item, str) or not item.strip():
        return None
    try:
        return parse_iso(item)
    except ValueError:
        return None


class DentistScheduleService(ScopedFlow):
    """Block slots, complete appointments and read patient history."""

    BLOCKED = "Schedule blocked."
    BLOCK_FAILED = "Failed to block schedule."
    COMPLETED = "Appointment marked as completed."
    COMPLETE_FAILED = "Failed to mark appointment as completed"
    DETAIL_REQUIRED = "Please enter treatment details."
    LOGIN_REQUIRED = "You must be logged in."

    def __init__(
        self,
        client: BackendClient,
        session: Optional[Session],
        scope: Optional[EffectScope] = None,
    ):
        super().__init__(scope, name="schedule")
        self.client = client
        self.session = session

    async def block(self, dentist_id: str, when: Union[datetime, str]) -> Outcome:
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)
        result = await self._call(self.client.block_schedule(dentist_id, self.session.token, when))
        if result is None or not result.is_ok:
            return Outcome(success=False, message=self.BLOCK_FAILED)
        return Outcome(success=True, message=self.BLOCKED, data=result.value)

    async def complete(self, booking_id: str, treatment_detail: str) -> Outcome:
        if not self.session:
            return Outcome(success=False, message=self.LOGIN_REQUIRED)
        if not treatment_detail or not treatment_detail.strip():
            return Outcome(success=False, message=self.DETAIL_REQUIRED)
        result = await self._call(
            self.client.complete_appointment(booking_id, self.session.token, treatment_detail.strip())
        )
        if result is None or not result.is_ok:
            return Outcome(success=False, message=self.COMPLETE_FAILED)
        return Outcome(success=True, message=self.COMPLETED, data=result.value)

    async def unavailable_slots(self, dentist_id: str) -> List[datetime]:
        """Times already taken in a dentist's calendar, sorted."""
        result = await self._call(self.client.get_dentist_unavailability(dentist_id))
        if result is None or not result.is_ok:
            return []
        items = result.value if isinstance(result.value, list) else []
        return sorted(t for t in (_slot_time(item) for item in items) if t is not None)

    async def patient_history(self, patient_id: str) -> List[Booking]:
        """Raises BackendAPIError when the history cannot be loaded."""
        if not self.session:
            return []
        result = await self._call(self.client.get_patient_history(self.session.token, patient_id))
        if result is None:
            return []
        return result.unwrap()


class DentistDetailView(ScopedFlow):
    """Dentist profile page: the record plus its reviews."""

    LOAD_FAILED = "Failed to load dentist"

    def __init__(self, client: BackendClient, scope: Optional[EffectScope] = None):
        super().__init__(scope, name="dentist-detail")
        self.client = client
        self.dentist: Optional[Dentist] = None
        self.reviews: List[Review] = []
        self.error: Optional[str] = None

    async def load(self, dentist_id: str) -> bool:
        try:
            result = await self._call(self.client.get_dentist(dentist_id))
            if result is None:
                return False
            self.dentist = result.unwrap()
        except BackendAPIError as e:
            logger.error(f"detail: dentist {dentist_id} failed to load: {e}")
            self.error = self.LOAD_FAILED
            return False

        reviews = await self._call(self.client.get_dentist_reviews(dentist_id))
        if reviews is not None and reviews.is_ok:
            self.reviews = reviews.value
        else:
            # Reviews are optional on the page
            self.reviews = []
        return True

    @property
    def average_rating(self) -> Optional[float]:
        scores = [r.rating for r in self.reviews if 1 <= r.rating <= 5]
        if scores:
            return round(sum(scores) / len(scores), 2)
        return self.dentist.average_rating() if self.dentist else None
