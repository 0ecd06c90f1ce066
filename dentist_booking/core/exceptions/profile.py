"""
Profile-related exceptions.
"""


class ProfileAccessError(Exception):
    """Exception raised when the session user may not edit a dentist profile."""
    pass


class ProfileValidationError(ValueError):
    """Exception raised when the profile form holds invalid values."""
    pass
