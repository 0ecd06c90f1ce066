"""
User-related enums.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role; authorization is enforced by the backend."""

    USER = "user"
    ADMIN = "admin"
    DENTIST = "dentist"
    BANNED = "banned"

    @classmethod
    def from_string(cls, value) -> "UserRole":
        """Convert string to UserRole, defaulting to USER."""
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            return cls.USER

        value = value.strip().lower()
        for member in cls:
            if member.value == value:
                return member
        return cls.USER
