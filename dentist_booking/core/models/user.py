"""
User and session models.
"""

from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..enums import UserRole
from .common import BackendModel, coerce_ref


class User(BackendModel):
    """Account record."""

    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    name: str = ""
    email: Optional[str] = None
    telephone: Optional[str] = None
    role: UserRole = UserRole.USER
    dentist_id: Optional[str] = None

    @field_validator("role", mode="before")
    @classmethod
    def _role(cls, value: Any) -> UserRole:
        return UserRole.from_string(value)

    @field_validator("dentist_id", mode="before")
    @classmethod
    def _dentist_ref(cls, value: Any) -> Optional[str]:
        return coerce_ref(value)

    @property
    def is_banned(self) -> bool:
        return self.role == UserRole.BANNED


class Session(BaseModel):
    """Authenticated session handed to flows by the caller."""

    model_config = ConfigDict(extra="forbid")

    token: str = Field(min_length=1)
    user_id: Optional[str] = None
