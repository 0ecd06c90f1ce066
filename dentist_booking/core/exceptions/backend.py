"""
Backend API-related exceptions.
"""


class BackendAPIError(Exception):
    """Raised when a failed backend result is unwrapped."""

    def __init__(self, error):
        super().__init__(error.message)
        self.error = error

    @property
    def code(self):
        return self.error.code
