"""achfile exception hierarchy."""

from __future__ import annotations

from collections.abc import Iterable


class AchFileError(Exception):
    """Base exception for all achfile errors."""


class ConfigurationError(AchFileError):
    """File-level or batch-level settings are missing or malformed."""

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        self.fields = tuple(fields)
        if self.fields:
            message = f"{message}: {', '.join(self.fields)}"
        super().__init__(message)


class ValidationError(AchFileError):
    """An entry was rejected; ``fields`` names every violated field."""

    def __init__(self, message: str, fields: Iterable[str] = ()) -> None:
        self.fields = tuple(fields)
        if self.fields:
            message = f"{message}: {', '.join(self.fields)}"
        super().__init__(message)


class BatchNotFoundError(AchFileError):
    """Batch handle does not belong to this encoder."""

    def __init__(self, batch_number: int) -> None:
        self.batch_number = batch_number
        super().__init__(f"Batch {batch_number} is not owned by this file")


class StorageError(AchFileError, OSError):
    """Remote file store operation failed."""
