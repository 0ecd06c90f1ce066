"""
Tests for core models and enums.
"""

from datetime import timezone

import pytest

from dentist_booking.core.enums import BookingStatus, ErrorCode, PriceSort, UserRole
from dentist_booking.core.exceptions import BackendAPIError
from dentist_booking.core.models import Booking, Dentist, Err, Ok, Session, User


class TestDentist:
    """Test Dentist model."""

    def test_string_expertise_becomes_list(self):
        dentist = Dentist.model_validate({"_id": "d1", "name": "A", "area_expertise": "Orthodontics"})
        assert dentist.area_expertise == ["Orthodontics"]

    def test_list_expertise_is_trimmed_and_deduplicated(self):
        dentist = Dentist.model_validate(
            {"_id": "d1", "area_expertise": [" Orthodontics", "Orthodontics", "", "Endodontics"]}
        )
        assert dentist.area_expertise == ["Orthodontics", "Endodontics"]

    def test_missing_expertise_is_empty_list(self):
        assert Dentist.model_validate({"_id": "d1"}).area_expertise == []
        assert Dentist.model_validate({"_id": "d1", "area_expertise": None}).area_expertise == []

    def test_backend_field_names(self):
        dentist = Dentist.model_validate({"id": "d9", "StartingPrice": 1500, "year_experience": None})
        assert dentist.id == "d9"
        assert dentist.starting_price == 1500
        assert dentist.year_experience == 0

    def test_average_rating(self):
        dentist = Dentist.model_validate({
            "_id": "d1",
            "rating": [{"rating": 5, "review": "great"}, {"rating": 4, "review": None}, "junk"],
        })
        assert len(dentist.rating) == 2
        assert dentist.average_rating() == 4.5
        assert Dentist.model_validate({"_id": "d2"}).average_rating() is None


class TestBooking:
    """Test Booking model."""

    def test_populated_dentist(self):
        booking = Booking.model_validate({
            "_id": "b1",
            "bookingDate": "2025-06-01T10:00:00.000Z",
            "user": "u1",
            "dentist": {"_id": "d1", "name": "Dr. Emily Richardson"},
            "status": "confirmed",
        })
        assert booking.dentist_id == "d1"
        assert booking.dentist_name == "Dr. Emily Richardson"
        assert booking.user_id == "u1"
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.booking_date.tzinfo is not None

    def test_dentist_as_plain_id(self):
        booking = Booking.model_validate({"_id": "b1", "bookingDate": "2025-06-01T10:00:00", "dentist": "d1"})
        assert booking.dentist_id == "d1"
        assert booking.dentist_name == ""
        assert booking.booking_date.tzinfo == timezone.utc

    def test_status_defaults_and_fallbacks(self):
        base = {"_id": "b1", "bookingDate": "2025-06-01T10:00:00Z"}
        assert Booking.model_validate(base).status == BookingStatus.UPCOMING
        assert Booking.model_validate({**base, "status": "Canceled"}).status == BookingStatus.CANCELLED
        assert Booking.model_validate({**base, "status": "pending"}).status == BookingStatus.UNKNOWN

    def test_only_completed_is_reviewable(self):
        base = {"_id": "b1", "bookingDate": "2025-06-01T10:00:00Z"}
        assert Booking.model_validate({**base, "status": "completed"}).is_reviewable()
        assert not Booking.model_validate({**base, "status": "confirmed"}).is_reviewable()


class TestUser:
    """Test User and Session models."""

    def test_role_parsing(self):
        assert User.model_validate({"_id": "u1", "role": "BANNED"}).is_banned
        assert User.model_validate({"_id": "u1", "role": "superuser"}).role == UserRole.USER

    def test_dentist_ref(self):
        user = User.model_validate({"_id": "u1", "role": "dentist", "dentist_id": {"_id": "d1"}})
        assert user.dentist_id == "d1"

    def test_session_requires_token(self):
        with pytest.raises(ValueError):
            Session(token="")


class TestResult:
    """Test the Ok / Err result types."""

    def test_ok_unwrap(self):
        result = Ok(value=[1, 2])
        assert result.is_ok
        assert result.kind == "ok"
        assert result.unwrap() == [1, 2]

    def test_err_unwrap_raises(self):
        result = Err(code=ErrorCode.NOT_FOUND, message="Booking not found", status_code=404)
        assert not result.is_ok
        assert result.kind == "error"
        with pytest.raises(BackendAPIError) as exc:
            result.unwrap()
        assert exc.value.code == ErrorCode.NOT_FOUND
        assert str(exc.value) == "Booking not found"

    def test_error_code_from_status(self):
        assert ErrorCode.from_status(401) == ErrorCode.UNAUTHORIZED
        assert ErrorCode.from_status(409) == ErrorCode.CLIENT_ERROR
        assert ErrorCode.from_status(503) == ErrorCode.SERVER_ERROR


def test_price_sort_toggle():
    assert PriceSort.NONE.toggled() == PriceSort.ASC
    assert PriceSort.ASC.toggled() == PriceSort.DESC
    assert PriceSort.DESC.toggled() == PriceSort.ASC
