"""In-memory backend for unit tests — dict-backed fake."""

from __future__ import annotations


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests; keeps what was written."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.content_types: dict[str, str] = {}

    def write(self, path: str, data: bytes, content_type: str = "text/plain") -> str:
        self.files[path] = data
        self.content_types[path] = content_type
        return path
