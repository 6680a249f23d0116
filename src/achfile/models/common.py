"""Shared pydantic field types."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator


def _printable_ascii(value: str) -> str:
    if not (value.isascii() and value.isprintable()):
        raise ValueError("must contain printable ASCII characters only")
    return value


# Alphanumeric NACHA fields are written to a plain ASCII file.
AsciiText = Annotated[str, AfterValidator(_printable_ascii)]
