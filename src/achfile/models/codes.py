"""Closed code tables for NACHA records."""

from __future__ import annotations

from enum import StrEnum


class TransactionCode(StrEnum):
    CHECKING_CREDIT = "22"
    CHECKING_CREDIT_PRENOTE = "23"
    CHECKING_DEBIT = "27"
    CHECKING_DEBIT_PRENOTE = "28"
    SAVINGS_CREDIT = "32"
    SAVINGS_CREDIT_PRENOTE = "33"
    SAVINGS_DEBIT = "37"
    SAVINGS_DEBIT_PRENOTE = "38"
    GL_CREDIT = "42"
    GL_DEBIT = "47"

    @property
    def is_debit(self) -> bool:
        return self in _DEBIT_CODES


_DEBIT_CODES = frozenset({
    TransactionCode.CHECKING_DEBIT,
    TransactionCode.CHECKING_DEBIT_PRENOTE,
    TransactionCode.SAVINGS_DEBIT,
    TransactionCode.SAVINGS_DEBIT_PRENOTE,
    TransactionCode.GL_DEBIT,
})


class ServiceClassCode(StrEnum):
    MIXED = "200"
    CREDITS_ONLY = "220"
    DEBITS_ONLY = "225"

    def allows(self, code: TransactionCode) -> bool:
        """Whether an entry with ``code`` may appear in a batch of this class."""
        if self is ServiceClassCode.CREDITS_ONLY:
            return not code.is_debit
        if self is ServiceClassCode.DEBITS_ONLY:
            return code.is_debit
        return True


class StandardEntryClass(StrEnum):
    CCD = "CCD"  # Corporate credit or debit
    PPD = "PPD"  # Prearranged payment and deposit
    CTX = "CTX"  # Corporate trade exchange
    WEB = "WEB"  # Internet-initiated entry
