"""
Domain errors raised by the validation and store layers.

Each error carries a human‑readable ``message`` that is sent to the
client unchanged in the ``error`` field of the response body, and the
HTTP status the API layer answers with.
"""

from fastapi import status


class CustomerDirectoryError(Exception):
    """Base class for all customer directory errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Customer directory error"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class CustomerValidationError(CustomerDirectoryError):
    """The request body is malformed or a field fails its rule."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid customer data"


class CustomerNotFoundError(CustomerDirectoryError):
    """No live record has the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Customer not found"


class CustomerConflictError(CustomerDirectoryError):
    """A generated identifier kept colliding with live records."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Could not allocate a unique customer id"
