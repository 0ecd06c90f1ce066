"""
Booking history pipeline: filter, sort and paginate a user's bookings in memory.
"""

import math
from datetime import date
from typing import Iterable, List, Optional, Union
from pydantic import BaseModel, ConfigDict

from ...core.enums import BookingStatus, SortOrder
from ...core.models import Booking
from ...utils.date import DateParser
from ...utils.logging import get_logger

logger = get_logger("dentist.history")


class HistoryPage(BaseModel):
    """One rendered page of the booking history."""

    model_config = ConfigDict(extra="forbid")

    items: List[Booking]
    page: int
    page_size: int
    page_count: int
    total: int
    empty_message: Optional[str] = None
    date_error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.total == 0


class BookingHistoryPipeline:
    """
    In-memory booking table with search, status and date-range filters.

    The filtered list is recomputed from the raw list on every read. Any
    filter, sort or page-size change puts the view back on page 1.
    """

    EMPTY_MESSAGE = "No bookings found"
    INVALID_DATE_MESSAGE = "Invalid date"

    def __init__(
        self,
        bookings: Optional[Iterable[Booking]] = None,
        page_size: int = 5,
        timezone_name: str = "UTC",
        include_blocked: bool = False,
    ):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self._bookings: List[Booking] = list(bookings or [])
        self.date_parser = DateParser(timezone_name)
        self.include_blocked = include_blocked

        self.search: str = ""
        self.status: Optional[BookingStatus] = None
        self.date_from: Optional[date] = None
        self.date_to: Optional[date] = None
        self.date_error: Optional[str] = None
        self.sort_order: SortOrder = SortOrder.DESC
        self.page_size: int = page_size
        self.page: int = 1

        self.selected: Optional[Booking] = None

    @property
    def bookings(self) -> List[Booking]:
        return list(self._bookings)

    def set_bookings(self, bookings: Iterable[Booking]) -> None:
        """Replace the raw list (after a fetch) and go back to page 1."""
        self._bookings = list(bookings)
        self.page = 1

    # Inputs

    def set_search(self, term: Optional[str]) -> None:
        self.search = (term or "").strip()
        self.page = 1

    def set_status(self, status: Union[BookingStatus, str, None]) -> None:
        """Filter on one status; None, "" or "all" clears the filter."""
        if status is None or (isinstance(status, str) and status.strip().lower() in ("", "all")):
            self.status = None
        else:
            self.status = BookingStatus.from_value(status)
        self.page = 1

    def set_date_range(
        self,
        date_from: Union[date, str, None] = None,
        date_to: Union[date, str, None] = None,
    ) -> None:
        """
        Inclusive date range; either bound may be omitted.

        Text that cannot be read as a date leaves that bound unset and is
        reported through ``date_error``.
        """
        self.date_error = None
        self.date_from = self._parse_bound(date_from)
        self.date_to = self._parse_bound(date_to)
        self.page = 1

    def _parse_bound(self, value: Union[date, str, None]) -> Optional[date]:
        parsed = self.date_parser.parse_date_input(value)
        if parsed is None and isinstance(value, str) and value.strip():
            logger.warning(f"history: ignoring unreadable date {value!r}")
            self.date_error = f"{self.INVALID_DATE_MESSAGE}: {value.strip()}"
        return parsed

    def set_sort(self, order: Union[SortOrder, str]) -> None:
        self.sort_order = SortOrder(order)
        self.page = 1

    def set_page_size(self, page_size: int) -> None:
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self.page = 1

    def set_page(self, page: int) -> None:
        """Go to ``page``, clamped to the available pages."""
        self.page = min(max(1, page), self.page_count())

    def clear_filters(self) -> None:
        self.search = ""
        self.status = None
        self.date_from = None
        self.date_to = None
        self.date_error = None
        self.page = 1

    # Pipeline

    def _matches_search(self, booking: Booking, term: str) -> bool:
        return term in booking.dentist_name.lower() or term in booking.id.lower()

    def filtered(self) -> List[Booking]:
        """Status, then date range, then search; sorted by booking date."""
        items = self._bookings
        if not self.include_blocked:
            items = [b for b in items if b.status != BookingStatus.BLOCKED]

        if self.status is not None:
            items = [b for b in items if b.status == self.status]

        if self.date_from is not None:
            start = self.date_parser.start_of_day(self.date_from)
            items = [b for b in items if b.booking_date >= start]
        if self.date_to is not None:
            end = self.date_parser.end_of_day(self.date_to)
            items = [b for b in items if b.booking_date <= end]

        term = self.search.lower()
        if term:
            items = [b for b in items if self._matches_search(b, term)]

        return sorted(
            items,
            key=lambda b: b.booking_date,
            reverse=self.sort_order == SortOrder.DESC,
        )

    def page_count(self, total: Optional[int] = None) -> int:
        if total is None:
            total = len(self.filtered())
        return max(1, math.ceil(total / self.page_size))

    def view(self) -> HistoryPage:
        """Render the current page."""
        filtered = self.filtered()
        page_count = self.page_count(len(filtered))
        if self.page > page_count:
            self.page = page_count

        start = (self.page - 1) * self.page_size
        items = filtered[start:self.page * self.page_size]
        return HistoryPage(
            items=items,
            page=self.page,
            page_size=self.page_size,
            page_count=page_count,
            total=len(filtered),
            empty_message=self.EMPTY_MESSAGE if not filtered else None,
            date_error=self.date_error,
        )

    # Detail modal

    def open_details(self, booking_id: str) -> Optional[Booking]:
        """Select a booking for the detail view."""
        self.selected = next((b for b in self._bookings if b.id == booking_id), None)
        if self.selected is None:
            logger.warning(f"history: no booking {booking_id} to show")
        return self.selected

    def close_details(self) -> None:
        self.selected = None
