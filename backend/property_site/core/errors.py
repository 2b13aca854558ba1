from __future__ import annotations


class PropertySiteError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PropertySiteError):
    """A required request field is missing or empty."""

    status_code = 400


class NotFoundError(PropertySiteError):
    status_code = 404


class StorageError(PropertySiteError):
    """The database rejected or failed a statement."""

    status_code = 500


class PartialWriteError(PropertySiteError):
    """The listing image is on disk but its row could not be inserted."""

    status_code = 500

    def __init__(self, message: str, *, filename: str) -> None:
        super().__init__(message)
        self.filename = filename


def driver_message(exc: Exception) -> str:
    """The database driver's own message, without SQLAlchemy's statement dump."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)
