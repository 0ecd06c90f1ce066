"""
Error codes carried by failed backend results.
"""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Structured reason for a failed backend call."""

    NETWORK_ERROR = "network_error"
    TIMEOUT = "timeout"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    INVALID_RESPONSE = "invalid_response"

    @classmethod
    def from_status(cls, status_code: Optional[int]) -> "ErrorCode":
        """Map an HTTP status code to an ErrorCode."""
        mapping = {
            400: cls.BAD_REQUEST,
            401: cls.UNAUTHORIZED,
            403: cls.FORBIDDEN,
            404: cls.NOT_FOUND,
        }
        if status_code in mapping:
            return mapping[status_code]
        if status_code is not None and 400 <= status_code < 500:
            return cls.CLIENT_ERROR
        if status_code is not None and status_code >= 500:
            return cls.SERVER_ERROR
        return cls.INVALID_RESPONSE
