"""Type aliases used across achfile."""

from __future__ import annotations

Cents = int
Record = str  # one fixed-width 94-character line
