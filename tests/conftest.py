"""
Pytest configuration and fixtures.
"""

from typing import Optional
from unittest.mock import AsyncMock, Mock

import pytest

from dentist_booking.core.models import Booking, Dentist, Ok, Session, User
from dentist_booking.services.backend import BackendClient


def _dentist(
    did: str = "d1",
    name: str = "Dr. John Carter",
    expertise=("Orthodontics",),
    price: float = 1000,
    years: int = 5,
) -> Dentist:
    return Dentist.model_validate({
        "_id": did,
        "name": name,
        "area_expertise": list(expertise) if not isinstance(expertise, str) else expertise,
        "year_experience": years,
        "StartingPrice": price,
        "picture": f"https://img.example.com/{did}.jpg",
    })


def _booking(
    bid: str,
    when: str,
    dentist: Optional[Dentist] = None,
    status: str = "upcoming",
    user: str = "u1",
) -> Booking:
    return Booking.model_validate({
        "_id": bid,
        "bookingDate": when,
        "user": user,
        "dentist": (dentist or _dentist()).model_dump(by_alias=False),
        "status": status,
    })


@pytest.fixture
def dentist_factory():
    """Build Dentist records from backend-shaped data."""
    return _dentist


@pytest.fixture
def booking_factory():
    """Build Booking records from backend-shaped data."""
    return _booking


@pytest.fixture
def session():
    return Session(token="test-token", user_id="u1")


@pytest.fixture
def mock_backend():
    """Mock backend client; every call succeeds unless a test overrides it."""
    api = Mock(spec=BackendClient)
    api.get_dentists = AsyncMock(return_value=Ok(value=[_dentist()]))
    api.get_dentist = AsyncMock(return_value=Ok(value=_dentist()))
    api.update_dentist = AsyncMock(return_value=Ok(value={"success": True}))
    api.add_dentist_expertise = AsyncMock(return_value=Ok(value={"success": True}))
    api.remove_dentist_expertise = AsyncMock(return_value=Ok(value={"success": True}))
    api.replace_dentist_expertise = AsyncMock(return_value=Ok(value=[]))
    api.get_dentist_reviews = AsyncMock(return_value=Ok(value=[]))
    api.submit_review = AsyncMock(return_value=Ok(value={"success": True}))
    api.get_dentist_unavailability = AsyncMock(return_value=Ok(value=[]))
    api.get_bookings = AsyncMock(return_value=Ok(value=[]))
    api.get_booking = AsyncMock(
        return_value=Ok(value=_booking("b1", "2025-06-01T10:00:00.000Z"))
    )
    api.create_booking = AsyncMock(return_value=Ok(value={"success": True}))
    api.block_schedule = AsyncMock(return_value=Ok(value={"success": True}))
    api.update_booking = AsyncMock(return_value=Ok(value={"success": True}))
    api.cancel_booking = AsyncMock(return_value=Ok(value={"success": True}))
    api.complete_appointment = AsyncMock(return_value=Ok(value={"success": True}))
    api.delete_booking = AsyncMock(return_value=Ok(value={"success": True}))
    api.confirm_booking = AsyncMock(return_value=Ok(value={"success": True}))
    api.get_patient_history = AsyncMock(return_value=Ok(value=[]))
    api.get_users = AsyncMock(return_value=Ok(value=[]))
    api.get_user = AsyncMock(
        return_value=Ok(value=User.model_validate({"_id": "u1", "name": "Test User", "role": "user"}))
    )
    api.get_current_user = AsyncMock(
        return_value=Ok(value=User.model_validate({"_id": "u1", "name": "Test User", "role": "user"}))
    )
    api.update_user_role = AsyncMock(return_value=Ok(value={"success": True}))
    return api
