"""ABA routing number checksum."""

from __future__ import annotations

WEIGHTS = (3, 7, 1, 3, 7, 1, 3, 7, 1)


def validate_routing_number(routing_number: str) -> bool:
    """True iff ``routing_number`` is nine digits whose weighted sum is divisible by 10."""
    if not isinstance(routing_number, str):
        return False
    if len(routing_number) != 9 or not routing_number.isascii() or not routing_number.isdigit():
        return False
    total = sum(int(digit) * weight for digit, weight in zip(routing_number, WEIGHTS))
    return total % 10 == 0


def compute_check_digit(dfi_id: str) -> str:
    """Return the ninth digit that makes the 8-digit ``dfi_id`` a valid routing number."""
    if len(dfi_id) != 8 or not dfi_id.isascii() or not dfi_id.isdigit():
        raise ValueError(f"DFI identification must be 8 digits, got {dfi_id!r}")
    partial = sum(int(digit) * weight for digit, weight in zip(dfi_id, WEIGHTS))
    return str((10 - partial % 10) % 10)
