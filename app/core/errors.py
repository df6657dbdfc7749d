"""Store-level errors raised by the core accessors and mapped to HTTP responses in app.main."""

from typing import Optional


class StoreError(Exception):
    """A query against the content store failed."""

    def __init__(self, message: str, table: Optional[str] = None):
        super().__init__(message)
        self.table = table


class RecordNotFound(StoreError):
    pass


class ReorderConflict(StoreError):
    """Neighbouring rows kept changing while a move was being applied."""


class UploadError(StoreError):
    pass
