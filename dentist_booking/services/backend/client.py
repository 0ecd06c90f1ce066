"""
Backend REST client: one coroutine per endpoint, each returning an ApiResult.
"""

import asyncio
from datetime import datetime
from typing import Any, Dict, List, Optional, Type, Union
import httpx
from pydantic import BaseModel, ValidationError

from ...config import Settings
from ...core.enums import BookingStatus, ErrorCode, UserRole
from ...core.models import ApiResult, Booking, Dentist, Err, Ok, Review, User
from ...utils.date import to_iso_utc
from ...utils.logging import get_logger

logger = get_logger("dentist.backend")

API_PREFIX = "/api/v1"


class BackendClient:
    """Client for the dentist booking REST backend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "BackendClient":
        return cls(settings.backend_url, timeout=settings.request_timeout)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{API_PREFIX}{path}"

    @staticmethod
    def _headers(token: Optional[str]) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        """Pull a human message out of an error body, if there is one."""
        try:
            body = response.json()
        except ValueError:
            text = response.text.strip()
            return text or None
        if isinstance(body, dict):
            message = body.get("message") or body.get("error")
            if isinstance(message, str) and message:
                return message
        return None

    async def _make_request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiResult:
        """Make one HTTP request and fold every failure into an Err."""
        url = self._url(path)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    json=json,
                    params=params,
                    headers=self._headers(token),
                )
                response.raise_for_status()
        except httpx.TimeoutException:
            logger.error(f"{method} {path} timed out")
            return Err(code=ErrorCode.TIMEOUT, message="Request timed out")
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = self._error_message(e.response) or f"HTTP error {status}"
            logger.error(f"{method} {path} failed: HTTP {status}")
            return Err(code=ErrorCode.from_status(status), message=message, status_code=status)
        except httpx.RequestError as e:
            logger.error(f"{method} {path} request failed: {e}")
            return Err(code=ErrorCode.NETWORK_ERROR, message=f"Request failed: {e}")

        try:
            payload = response.json()
        except ValueError:
            logger.error(f"{method} {path} returned a non-JSON body")
            return Err(
                code=ErrorCode.INVALID_RESPONSE,
                message="Invalid response format",
                status_code=response.status_code,
            )

        if isinstance(payload, dict) and payload.get("success") is False:
            message = payload.get("message") or "Request was not successful"
            logger.warning(f"{method} {path} answered success=false: {message}")
            return Err(
                code=ErrorCode.INVALID_RESPONSE,
                message=message,
                status_code=response.status_code,
            )

        return Ok(value=payload)

    @staticmethod
    def _data(payload: Any) -> Any:
        """Unwrap the {success, count, pagination, data} envelope."""
        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload

    def _parse_one(self, result: ApiResult, model: Type[BaseModel]) -> ApiResult:
        if not result.is_ok:
            return result
        try:
            return Ok(value=model.model_validate(self._data(result.value)))
        except ValidationError as e:
            logger.error(f"malformed {model.__name__} in response: {e.error_count()} errors")
            return Err(code=ErrorCode.INVALID_RESPONSE, message=f"Malformed {model.__name__} data")

    def _parse_many(self, result: ApiResult, model: Type[BaseModel]) -> ApiResult:
        if not result.is_ok:
            return result
        data = self._data(result.value)
        if not isinstance(data, list):
            return Err(code=ErrorCode.INVALID_RESPONSE, message=f"Expected a list of {model.__name__}")
        try:
            return Ok(value=[model.model_validate(item) for item in data])
        except ValidationError as e:
            logger.error(f"malformed {model.__name__} list in response: {e.error_count()} errors")
            return Err(code=ErrorCode.INVALID_RESPONSE, message=f"Malformed {model.__name__} data")

    # Dentists

    async def get_dentists(self) -> ApiResult:
        """List all dentists."""
        result = await self._make_request("GET", "/dentists")
        return self._parse_many(result, Dentist)

    async def get_dentist(self, dentist_id: str) -> ApiResult:
        """Fetch one dentist record."""
        result = await self._make_request("GET", f"/dentists/{dentist_id}")
        return self._parse_one(result, Dentist)

    async def update_dentist(self, dentist_id: str, token: str, data: Dict[str, Any]) -> ApiResult:
        """Update general dentist fields (experience, price, picture, bio)."""
        return await self._make_request("PUT", f"/dentists/{dentist_id}", token=token, json=data)

    async def add_dentist_expertise(self, dentist_id: str, token: str, expertise: str) -> ApiResult:
        """Add one expertise tag."""
        return await self._make_request(
            "PUT", f"/dentists/{dentist_id}/expertise", token=token, json={"expertise": expertise}
        )

    async def remove_dentist_expertise(
        self, dentist_id: str, token: str, expertise: str = "all"
    ) -> ApiResult:
        """Remove one expertise tag, or every tag with ``"all"``."""
        return await self._make_request(
            "DELETE", f"/dentists/{dentist_id}/expertise", token=token, json={"expertise": expertise}
        )

    async def replace_dentist_expertise(
        self, dentist_id: str, token: str, expertise: List[str]
    ) -> ApiResult:
        """
        Replace the dentist's expertise tags.

        Clears all tags, then re-adds each selected tag concurrently. A failed
        clear is logged and the adds still run; the first failed add is returned.
        """
        removed = await self.remove_dentist_expertise(dentist_id, token)
        if not removed.is_ok:
            logger.warning(f"clearing expertise of {dentist_id} failed: {removed.message}")

        results = await asyncio.gather(
            *(self.add_dentist_expertise(dentist_id, token, tag) for tag in expertise)
        )
        for result in results:
            if not result.is_ok:
                return result
        return Ok(value=[r.value for r in results])

    async def get_dentist_reviews(self, dentist_id: str) -> ApiResult:
        """List reviews of a dentist."""
        result = await self._make_request("GET", f"/dentists/reviews/{dentist_id}")
        return self._parse_many(result, Review)

    async def submit_review(self, dentist_id: str, token: str, rating: int, review: str) -> ApiResult:
        """Submit a star rating and review text for a dentist."""
        return await self._make_request(
            "PUT",
            f"/dentists/reviews/{dentist_id}",
            token=token,
            json={"rating": rating, "review": review},
        )

    async def get_dentist_unavailability(self, dentist_id: str) -> ApiResult:
        """Booked or blocked slots of a dentist."""
        result = await self._make_request("GET", f"/dentists/availibility/{dentist_id}")
        if not result.is_ok:
            return result
        return Ok(value=self._data(result.value))

    # Bookings

    async def get_bookings(self, token: str) -> ApiResult:
        """Bookings visible to the session user."""
        result = await self._make_request("GET", "/bookings", token=token)
        return self._parse_many(result, Booking)

    async def get_booking(self, booking_id: str, token: Optional[str] = None) -> ApiResult:
        """Fetch one booking; confirmation links call this without a token."""
        result = await self._make_request("GET", f"/bookings/{booking_id}", token=token)
        return self._parse_one(result, Booking)

    async def create_booking(
        self, dentist_id: str, token: str, booking_date: Union[datetime, str]
    ) -> ApiResult:
        """Book an appointment with a dentist."""
        return await self._make_request(
            "POST",
            f"/dentists/{dentist_id}/bookings",
            token=token,
            json={"bookingDate": to_iso_utc(booking_date)},
        )

    async def block_schedule(
        self, dentist_id: str, token: str, booking_date: Union[datetime, str]
    ) -> ApiResult:
        """Block a slot in a dentist's schedule."""
        return await self._make_request(
            "POST",
            f"/dentists/{dentist_id}/bookings",
            token=token,
            json={"bookingDate": to_iso_utc(booking_date), "status": BookingStatus.BLOCKED.value},
        )

    async def update_booking(
        self, booking_id: str, token: str, booking_date: Union[datetime, str], dentist_id: str
    ) -> ApiResult:
        """Move a booking to another date and/or dentist."""
        return await self._make_request(
            "PUT",
            f"/bookings/{booking_id}",
            token=token,
            json={"bookingDate": to_iso_utc(booking_date), "dentist": dentist_id},
        )

    async def cancel_booking(self, booking_id: str, token: str) -> ApiResult:
        """Mark a booking cancelled."""
        return await self._make_request(
            "PUT",
            f"/bookings/{booking_id}",
            token=token,
            json={"status": BookingStatus.CANCELLED.value},
        )

    async def complete_appointment(
        self, booking_id: str, token: str, treatment_detail: str
    ) -> ApiResult:
        """Mark a booking completed with treatment notes."""
        return await self._make_request(
            "PUT",
            f"/bookings/{booking_id}",
            token=token,
            json={"status": BookingStatus.COMPLETED.value, "treatmentDetail": treatment_detail},
        )

    async def delete_booking(self, booking_id: str, token: str) -> ApiResult:
        """Delete a booking."""
        return await self._make_request("DELETE", f"/bookings/{booking_id}", token=token)

    async def confirm_booking(self, booking_id: str) -> ApiResult:
        """Confirm a booking from an emailed link (no authentication)."""
        return await self._make_request("PUT", f"/bookings/{booking_id}/confirm")

    async def get_patient_history(self, token: str, patient_id: str) -> ApiResult:
        """All bookings of one patient."""
        result = await self._make_request(
            "GET", f"/bookings/patientHistory/{patient_id}", token=token
        )
        return self._parse_many(result, Booking)

    # Users

    async def get_users(self, token: str) -> ApiResult:
        """List all users (admin)."""
        result = await self._make_request("GET", "/users", token=token)
        return self._parse_many(result, User)

    async def get_current_user(self, token: str) -> ApiResult:
        """The account the token belongs to."""
        result = await self._make_request("GET", "/auth/me", token=token)
        return self._parse_one(result, User)

    async def get_user(self, token: str, user_id: str) -> ApiResult:
        """Fetch one user."""
        result = await self._make_request("GET", f"/users/{user_id}", token=token)
        return self._parse_one(result, User)

    async def update_user_role(self, token: str, user_id: str, role: Union[UserRole, str]) -> ApiResult:
        """Change a user's role (admin)."""
        role_value = role.value if isinstance(role, UserRole) else role
        return await self._make_request(
            "PUT", f"/users/{user_id}", token=token, json={"role": role_value}
        )
