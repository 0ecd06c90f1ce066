"""
Main application entry point.
"""

import uvicorn

from .api.app import create_app
from .config import get_settings

settings = get_settings()
app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run(
        "dentist_booking.main:app",
        host="0.0.0.0",
        port=8001,
        reload=settings.debug,
    )
