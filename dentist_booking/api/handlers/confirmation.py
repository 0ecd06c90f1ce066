"""
Confirmation link endpoints (no authentication).
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from ...core.enums import ConfirmationState
from ...services.backend import BackendClient
from ...services.confirmation import ConfirmationFlow
from ..dependencies import get_backend_client


def _flow_body(flow: ConfirmationFlow) -> dict:
    return {
        "booking": flow.booking.model_dump(mode="json") if flow.booking else None,
        "state": flow.state.value,
        "can_confirm": flow.can_confirm,
        "message": flow.message,
        "error": flow.error,
    }


class ConfirmationHandler:
    """Handler for booking confirmation links."""

    def __init__(self):
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup confirmation routes."""

        async def _load(booking_id: str, client: BackendClient) -> ConfirmationFlow:
            flow = ConfirmationFlow(client, booking_id)
            if not await flow.load():
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=flow.load_error)
            return flow

        @self.router.get("/{booking_id}")
        async def show_booking(booking_id: str, client: BackendClient = Depends(get_backend_client)):
            """Booking details behind a confirmation link."""
            flow = await _load(booking_id, client)
            return _flow_body(flow)

        @self.router.post("/{booking_id}")
        async def confirm_booking(booking_id: str, client: BackendClient = Depends(get_backend_client)):
            """Confirm the booking."""
            flow = await _load(booking_id, client)
            await flow.confirm()
            code = status.HTTP_400_BAD_REQUEST if flow.state == ConfirmationState.ERROR else status.HTTP_200_OK
            return JSONResponse(status_code=code, content=_flow_body(flow))
