"""
FastAPI dependencies: backend client, settings and the caller's session.
"""

from typing import Optional
from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config import Settings
from ..core.models import Session
from ..services.backend import BackendClient

_bearer = HTTPBearer(auto_error=False)


def get_backend_client(request: Request) -> BackendClient:
    """Client created once by the app factory."""
    return request.app.state.backend_client


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    x_user_id: Optional[str] = Header(default=None),
) -> Session:
    """Session issued by the external auth provider, passed as a bearer token."""
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You must be logged in to see your booking History.",
        )
    return Session(token=credentials.credentials, user_id=x_user_id)
