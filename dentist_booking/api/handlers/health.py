"""
Health check handler.
"""

from datetime import datetime
from fastapi import APIRouter
from pydantic import BaseModel

from ...config import Settings


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float
    backend_url: str


class HealthHandler:
    """Handler for health check endpoints."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            """Basic health check endpoint."""
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=uptime,
                backend_url=self.settings.backend_url,
            )

        @self.router.get("/live")
        async def liveness_check():
            """Liveness check for container orchestration."""
            return {"status": "alive"}
