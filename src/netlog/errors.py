"""Error kinds raised by the HTTP log store."""

from __future__ import annotations


class HttpLogStoreError(RuntimeError):
    """Base class for HTTP log store failures."""


class SchemaError(HttpLogStoreError):
    """Raised when the log table cannot be created."""


class StorageError(HttpLogStoreError):
    """Raised when the engine rejects a write or read."""


class RecordCorruptionError(HttpLogStoreError):
    """Raised when a stored row cannot be mapped back to a record."""

    def __init__(self, message: str, *, record_id: int | None = None) -> None:
        super().__init__(message)
        self.record_id = record_id
