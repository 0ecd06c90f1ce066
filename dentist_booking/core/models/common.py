"""
Shared helpers for models mirrored from the backend.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class BackendModel(BaseModel):
    """Base for backend records; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def coerce_ref(value: Any) -> Optional[str]:
    """Reduce a populated reference ({"_id": ...}) to its id string."""
    if value is None:
        return None
    if isinstance(value, dict):
        ref = value.get("_id") or value.get("id")
        return str(ref) if ref is not None else None
    if isinstance(value, BaseModel):
        return getattr(value, "id", None)
    return str(value)
