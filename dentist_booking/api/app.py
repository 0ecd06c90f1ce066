"""
FastAPI application factory and configuration.
"""

from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import Settings, get_settings
from ..services.backend import BackendClient
from ..utils.logging import configure_logging
from .handlers import BookingHandler, ConfirmationHandler, DentistHandler, HealthHandler
from .middleware import LoggingMiddleware


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[BackendClient] = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Dentist listings, bookings and appointment confirmation",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.backend_client = client or BackendClient.from_settings(settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Register routes
    app.include_router(HealthHandler(settings).router, prefix="/health", tags=["health"])
    app.include_router(DentistHandler().router, prefix="/dentists", tags=["dentists"])
    app.include_router(BookingHandler().router, prefix="/bookings", tags=["bookings"])
    app.include_router(ConfirmationHandler().router, prefix="/confirm", tags=["confirmation"])

    return app
