"""
Tests for dentist schedule actions and the dentist detail view.
"""

from datetime import datetime, timezone

import pytest

from dentist_booking.core.enums import ErrorCode
from dentist_booking.core.exceptions import BackendAPIError
from dentist_booking.core.models import Err, Ok, Review
from dentist_booking.services.dentist import DentistDetailView, DentistScheduleService


class TestSchedule:
    @pytest.mark.asyncio
    async def test_block(self, mock_backend, session):
        service = DentistScheduleService(mock_backend, session)

        outcome = await service.block("d1", "2025-06-01T10:00:00.000Z")

        assert outcome.message == "Schedule blocked."
        mock_backend.block_schedule.assert_awaited_once_with("d1", "test-token", "2025-06-01T10:00:00.000Z")

    @pytest.mark.asyncio
    async def test_complete_requires_details(self, mock_backend, session):
        service = DentistScheduleService(mock_backend, session)

        outcome = await service.complete("b1", "   ")

        assert outcome.message == "Please enter treatment details."
        mock_backend.complete_appointment.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_complete(self, mock_backend, session):
        service = DentistScheduleService(mock_backend, session)

        outcome = await service.complete("b1", " Filling on 36 ")

        assert outcome.success
        mock_backend.complete_appointment.assert_awaited_once_with("b1", "test-token", "Filling on 36")

    @pytest.mark.asyncio
    async def test_complete_failure(self, mock_backend, session):
        mock_backend.complete_appointment.return_value = Err(code=ErrorCode.FORBIDDEN, message="no")

        outcome = await DentistScheduleService(mock_backend, session).complete("b1", "Scaling")

        assert outcome.message == "Failed to mark appointment as completed"

    @pytest.mark.asyncio
    async def test_unavailable_slots_are_parsed_and_sorted(self, mock_backend, session):
        mock_backend.get_dentist_unavailability.return_value = Ok(value=[
            "2025-06-02T10:00:00.000Z",
            {"bookingDate": "2025-06-01T09:00:00.000Z"},
            "not a date",
            None,
        ])

        slots = await DentistScheduleService(mock_backend, session).unavailable_slots("d1")

        assert slots == [
            datetime(2025, 6, 1, 9, tzinfo=timezone.utc),
            datetime(2025, 6, 2, 10, tzinfo=timezone.utc),
        ]

    @pytest.mark.asyncio
    async def test_patient_history_raises_on_failure(self, mock_backend, session):
        mock_backend.get_patient_history.return_value = Err(code=ErrorCode.FORBIDDEN, message="no access")

        with pytest.raises(BackendAPIError) as exc_info:
            await DentistScheduleService(mock_backend, session).patient_history("u2")

        assert exc_info.value.code == ErrorCode.FORBIDDEN


class TestDentistDetailView:
    @pytest.mark.asyncio
    async def test_load_with_reviews(self, mock_backend):
        mock_backend.get_dentist_reviews.return_value = Ok(value=[
            Review.model_validate({"rating": 5, "review": "Great"}),
            Review.model_validate({"rating": 4, "review": "Good"}),
        ])
        view = DentistDetailView(mock_backend)

        assert await view.load("d1") is True

        assert view.dentist.id == "d1"
        assert view.average_rating == 4.5

    @pytest.mark.asyncio
    async def test_review_failure_still_shows_dentist(self, mock_backend):
        mock_backend.get_dentist_reviews.return_value = Err(code=ErrorCode.SERVER_ERROR, message="x")
        view = DentistDetailView(mock_backend)

        assert await view.load("d1") is True
        assert view.reviews == []

    @pytest.mark.asyncio
    async def test_missing_dentist(self, mock_backend):
        mock_backend.get_dentist.return_value = Err(code=ErrorCode.NOT_FOUND, message="x")
        view = DentistDetailView(mock_backend)

        assert await view.load("zz") is False
        assert view.error == "Failed to load dentist"
