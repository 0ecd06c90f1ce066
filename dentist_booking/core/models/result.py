"""
Structured result returned by every backend client call.
"""

from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict

from ..enums import ErrorCode
from ..exceptions import BackendAPIError


class Ok(BaseModel):
    """Successful backend call."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    kind: Literal["ok"] = "ok"
    value: Any = None

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


class Err(BaseModel):
    """Failed backend call with a structured error code."""

    model_config = ConfigDict(extra="forbid")

    kind: Literal["error"] = "error"
    code: ErrorCode
    message: str
    status_code: Optional[int] = None

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise BackendAPIError; lets handlers use a single try/except."""
        raise BackendAPIError(self)


ApiResult = Union[Ok, Err]
