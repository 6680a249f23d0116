"""Pluggable file stores behind the IFileStore protocol."""

from __future__ import annotations

from achfile.core.config import AppSettings
from achfile.core.protocols import IFileStore
from achfile.persistence.local_backend import LocalFileStore
from achfile.persistence.s3_backend import S3FileStore


def create_file_store(settings: AppSettings | None = None) -> IFileStore:
    """Create the file store selected by ``settings.storage.backend``."""
    if settings is None:
        settings = AppSettings()

    storage = settings.storage
    if storage.backend == "s3":
        return S3FileStore(
            bucket=storage.bucket,
            region=storage.region,
            endpoint_url=storage.endpoint_url,
            key_prefix=storage.key_prefix,
        )
    return LocalFileStore(root_dir=storage.root_dir)
