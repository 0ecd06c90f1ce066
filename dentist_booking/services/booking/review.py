"""
Review modal for completed bookings.
"""

from typing import Optional
from pydantic import ValidationError

from ...core.models import Booking, ReviewSubmission, Session
from ...utils.effects import EffectScope, ScopedFlow
from ...utils.logging import get_logger
from ..backend import BackendClient

logger = get_logger("dentist.review")


class ReviewForm(ScopedFlow):
    """Star rating + free-text review for one completed booking."""

    SUCCESS_MESSAGE = "Review submitted successfully!"
    FAILURE_MESSAGE = "Failed to submit review. Please try again."
    INVALID_MESSAGE = "Please choose a rating from 1 to 5 and write a review."
    NOT_REVIEWABLE_MESSAGE = "Only completed appointments can be reviewed."

    def __init__(
        self,
        client: BackendClient,
        session: Session,
        dismiss_seconds: float = 3.0,
        scope: Optional[EffectScope] = None,
    ):
        super().__init__(scope, name="review")
        self.client = client
        self.session = session
        self.dismiss_seconds = dismiss_seconds

        self.booking: Optional[Booking] = None
        self.rating: int = 0
        self.review: str = ""
        self.submitting = False
        self.success_message: Optional[str] = None
        self.error_message: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.booking is not None

    def open(self, booking: Booking) -> bool:
        """Open the modal; refused for bookings that are not completed."""
        if not booking.is_reviewable():
            self.error_message = self.NOT_REVIEWABLE_MESSAGE
            return False
        self.booking = booking
        self.rating = 0
        self.review = ""
        self.error_message = None
        return True

    def close_modal(self) -> None:
        self.booking = None
        self.rating = 0
        self.review = ""
        self.error_message = None

    def set_rating(self, rating: int) -> None:
        self.rating = rating

    def set_review(self, text: str) -> None:
        self.review = text

    def _dismiss_success(self) -> None:
        self.success_message = None

    async def submit(self) -> bool:
        """Send the review; True on success."""
        if self.booking is None or self.submitting:
            return False

        try:
            payload = ReviewSubmission(rating=self.rating, review=self.review.strip())
        except ValidationError:
            self.error_message = self.INVALID_MESSAGE
            return False

        dentist_id = self.booking.dentist_id
        if not dentist_id:
            self.error_message = self.FAILURE_MESSAGE
            return False

        self.submitting = True
        self.error_message = None
        try:
            result = await self._call(
                self.client.submit_review(dentist_id, self.session.token, payload.rating, payload.review)
            )
        finally:
            self.submitting = False

        if result is None:
            return False
        if not result.is_ok:
            logger.error(f"review for dentist {dentist_id} failed: {result.message}")
            self.error_message = self.FAILURE_MESSAGE
            return False

        logger.info(f"review submitted for dentist {dentist_id}")
        self.success_message = self.SUCCESS_MESSAGE
        self.close_modal()
        self.scope.later(self.dismiss_seconds, self._dismiss_success)
        return True
