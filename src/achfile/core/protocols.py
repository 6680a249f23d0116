"""Protocol interfaces for achfile abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Durable destination for generated NACHA files.

    ``write`` replaces any existing file at ``path`` in one step and returns
    the location the file was stored at.
    """

    def write(self, path: str, data: bytes, content_type: str = "text/plain") -> str: ...
