"""
User management.
"""

from .management import ROLE_OPTIONS, UserDirectory, UserRoleEditor

__all__ = ["ROLE_OPTIONS", "UserDirectory", "UserRoleEditor"]
