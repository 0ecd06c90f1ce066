"""
User-facing outcome of a flow action.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class Outcome(BaseModel):
    """Result of a form submission, shown to the user as one message."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    success: bool
    message: str = Field(description="Text to show to the user")
    data: Optional[Any] = Field(default=None, description="Backend payload for internal use")

    def __str__(self) -> str:  # pragma: no cover - simple
        return self.message
