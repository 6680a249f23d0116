"""Local filesystem backend implementing IFileStore."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


class LocalFileStore:
    """IFileStore on the local filesystem.

    Writes go to a temporary file in the target directory which is then
    renamed over the destination, so readers never see a partial file.
    ``OSError`` from the filesystem propagates unchanged.
    """

    def __init__(self, root_dir: str | Path = ".") -> None:
        self._root = Path(root_dir)

    def _resolve(self, path: str) -> Path:
        return self._root / path

    def write(self, path: str, data: bytes, content_type: str = "text/plain") -> str:
        target = self._resolve(path)
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        return str(target)
