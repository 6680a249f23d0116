"""Fixed-width field formatting."""

from __future__ import annotations

from datetime import date, time


def alpha(value: object, width: int) -> str:
    """Left-justify, space-pad and truncate to ``width``."""
    return str(value)[:width].ljust(width)


def numeric(value: int | str, width: int) -> str:
    """Right-justify and zero-pad to ``width``; values never get truncated."""
    text = str(value)
    if len(text) > width:
        raise ValueError(f"{text!r} does not fit a {width}-digit field")
    return text.rjust(width, "0")


def yymmdd(value: date) -> str:
    return value.strftime("%y%m%d")


def hhmm(value: time) -> str:
    return value.strftime("%H%M")


def blank(width: int) -> str:
    return " " * width
