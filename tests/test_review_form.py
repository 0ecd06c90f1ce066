"""
Tests for the review modal.
"""

import pytest

from dentist_booking.core.enums import ErrorCode
from dentist_booking.core.models import Err
from dentist_booking.services.booking import ReviewForm
from dentist_booking.utils.effects import EffectScope


@pytest.fixture
def completed(booking_factory):
    return booking_factory("b1", "2025-05-01T09:00:00.000Z", status="completed")


class TestOpen:
    def test_only_completed_bookings(self, mock_backend, session, booking_factory):
        form = ReviewForm(mock_backend, session)

        assert form.open(booking_factory("b2", "2025-05-01T09:00:00.000Z")) is False
        assert form.error_message == "Only completed appointments can be reviewed."
        assert not form.is_open

    def test_open_resets_inputs(self, mock_backend, session, completed):
        form = ReviewForm(mock_backend, session)
        form.open(completed)
        form.set_rating(4)
        form.close_modal()

        form.open(completed)

        assert form.rating == 0
        assert form.review == ""


class TestSubmit:
    @pytest.mark.asyncio
    async def test_success_message_dismisses_itself(self, mock_backend, session, completed):
        scope = EffectScope("review")
        form = ReviewForm(mock_backend, session, dismiss_seconds=0, scope=scope)
        form.open(completed)
        form.set_rating(5)
        form.set_review("  Painless and quick.  ")

        assert await form.submit() is True

        mock_backend.submit_review.assert_awaited_once_with("d1", "test-token", 5, "Painless and quick.")
        assert form.success_message == "Review submitted successfully!"
        assert not form.is_open

        await scope.drain()
        assert form.success_message is None

    @pytest.mark.asyncio
    async def test_closing_scope_keeps_pending_dismiss_from_running(self, mock_backend, session, completed):
        form = ReviewForm(mock_backend, session, dismiss_seconds=30)
        form.open(completed)
        form.set_rating(3)
        form.set_review("Fine")
        await form.submit()

        form.close()
        await form.scope.drain()

        assert form.success_message == "Review submitted successfully!"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating,text", [(0, "Good"), (6, "Good"), (4, "   ")])
    async def test_invalid_input_is_not_sent(self, mock_backend, session, completed, rating, text):
        form = ReviewForm(mock_backend, session)
        form.open(completed)
        form.set_rating(rating)
        form.set_review(text)

        assert await form.submit() is False
        assert form.error_message == "Please choose a rating from 1 to 5 and write a review."
        mock_backend.submit_review.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_backend_failure(self, mock_backend, session, completed):
        mock_backend.submit_review.return_value = Err(code=ErrorCode.SERVER_ERROR, message="boom")
        form = ReviewForm(mock_backend, session)
        form.open(completed)
        form.set_rating(4)
        form.set_review("Good")

        assert await form.submit() is False
        assert form.error_message == "Failed to submit review. Please try again."
        assert form.is_open

    @pytest.mark.asyncio
    async def test_submit_without_open_modal(self, mock_backend, session):
        assert await ReviewForm(mock_backend, session).submit() is False
