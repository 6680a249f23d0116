"""Entry detail: caller-supplied payment data and the immutable stored entry."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from achfile.codec.routing import validate_routing_number
from achfile.core.types import Cents
from achfile.models.codes import TransactionCode
from achfile.models.common import AsciiText

MAX_ENTRY_CENTS = 9_999_999_999  # 10-digit amount field

_CENT = Decimal("0.01")


def to_cents(amount: Decimal) -> Cents:
    """Dollars to integer cents, rounding half up."""
    return int((amount.quantize(_CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value())


class EntryData(BaseModel):
    """One payment instruction as handed to ``add_entry``."""

    model_config = {"frozen": True, "str_strip_whitespace": True, "extra": "forbid"}

    routing_number: str
    account_number: AsciiText = Field(min_length=1, max_length=17)
    amount: Decimal = Field(gt=0)
    receiving_company_name: AsciiText = Field(min_length=1)
    vendor_id: AsciiText = Field(min_length=1)
    receiving_company_id: Optional[AsciiText] = None
    transaction_code: TransactionCode = TransactionCode.CHECKING_CREDIT
    discretionary_data: AsciiText = Field(default="", max_length=2)
    addenda: Optional[AsciiText] = None

    @field_validator("routing_number")
    @classmethod
    def _check_routing_number(cls, value: str) -> str:
        if not validate_routing_number(value):
            raise ValueError("routing number must be 9 digits passing the ABA checksum")
        return value

    @field_validator("amount")
    @classmethod
    def _check_amount_fits(cls, value: Decimal) -> Decimal:
        cents = to_cents(value)
        if cents < 1:
            raise ValueError("amount rounds to zero cents")
        if cents > MAX_ENTRY_CENTS:
            raise ValueError("amount exceeds the 10-digit amount field")
        return value

    @property
    def cents(self) -> Cents:
        return to_cents(self.amount)


class Entry(BaseModel):
    """An entry detail record as committed to a batch. Never mutated."""

    model_config = {"frozen": True}

    sequence: int  # 1-based position within the batch
    transaction_code: TransactionCode
    routing_number: str
    account_number: str
    amount: Cents
    receiving_company_id: str
    receiving_company_name: str
    discretionary_data: str = ""
    addenda: Optional[str] = None
    trace_number: str

    @classmethod
    def from_data(cls, data: EntryData, *, sequence: int, originating_dfi_id: str) -> Entry:
        return cls(
            sequence=sequence,
            transaction_code=data.transaction_code,
            routing_number=data.routing_number,
            account_number=data.account_number,
            amount=data.cents,
            receiving_company_id=data.receiving_company_id or data.vendor_id,
            receiving_company_name=data.receiving_company_name,
            discretionary_data=data.discretionary_data,
            addenda=data.addenda or None,
            trace_number=trace_number(originating_dfi_id, sequence),
        )

    @property
    def receiving_dfi_id(self) -> str:
        return self.routing_number[:8]

    @property
    def check_digit(self) -> str:
        return self.routing_number[8]

    @property
    def has_addenda(self) -> bool:
        return self.addenda is not None

    @property
    def record_count(self) -> int:
        """Entry detail plus its addenda record, if any."""
        return 2 if self.has_addenda else 1

    @property
    def is_debit(self) -> bool:
        return self.transaction_code.is_debit


def trace_number(originating_dfi_id: str, sequence: int) -> str:
    """8-digit originating DFI followed by the 7-digit entry sequence."""
    return originating_dfi_id.rjust(8, "0")[:8] + str(sequence).rjust(7, "0")
