"""
Booking history and reservation endpoints.
"""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from ...config import Settings
from ...core.enums import SortOrder
from ...core.models import Session
from ...services.backend import BackendClient
from ...services.booking import BookingHistoryPipeline, ReservationForm, ReservationService
from ...utils.date import DateParser
from ..dependencies import get_app_settings, get_backend_client, get_session


class BookingRequest(BaseModel):
    """Reservation form submission."""

    model_config = ConfigDict(extra="forbid")

    dentist: Optional[str] = None
    date: Optional[datetime] = None


class BookingHandler:
    """Handler for booking endpoints."""

    def __init__(self):
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup booking routes."""

        @self.router.get("/history")
        async def booking_history(
            search: Optional[str] = None,
            status_filter: Optional[str] = Query(default=None, alias="status"),
            date_from: Optional[str] = None,
            date_to: Optional[str] = None,
            sort: SortOrder = SortOrder.DESC,
            page: int = Query(default=1, ge=1),
            page_size: Optional[int] = Query(default=None, ge=1),
            session: Session = Depends(get_session),
            client: BackendClient = Depends(get_backend_client),
            settings: Settings = Depends(get_app_settings),
        ):
            """One page of the session user's booking history."""
            result = await client.get_bookings(session.token)
            if not result.is_ok:
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail="Failed to load bookings",
                )

            pipeline = BookingHistoryPipeline(
                result.value,
                page_size=page_size or settings.default_page_size,
                timezone_name=settings.timezone,
            )
            pipeline.set_search(search)
            pipeline.set_status(status_filter)
            pipeline.set_date_range(date_from, date_to)
            if pipeline.date_error:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=pipeline.date_error,
                )
            pipeline.set_sort(sort)
            pipeline.set_page(page)

            view = pipeline.view()
            formatter = DateParser(settings.timezone)
            items = []
            for booking in view.items:
                item = booking.model_dump(mode="json")
                item["display_date"] = formatter.format_for_display(booking.booking_date)
                items.append(item)

            return {
                "items": items,
                "page": view.page,
                "page_size": view.page_size,
                "page_count": view.page_count,
                "total": view.total,
                "is_empty": view.is_empty,
                "empty_message": view.empty_message,
            }

        @self.router.post("")
        async def create_booking(
            body: BookingRequest,
            session: Session = Depends(get_session),
            client: BackendClient = Depends(get_backend_client),
        ):
            """Submit the reservation form."""
            service = ReservationService(client, session)
            outcome = await service.create(ReservationForm(body.dentist, body.date))
            code = status.HTTP_201_CREATED if outcome.success else status.HTTP_400_BAD_REQUEST
            return JSONResponse(
                status_code=code,
                content={"success": outcome.success, "message": outcome.message},
            )
