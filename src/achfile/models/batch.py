"""Batch header, batch snapshots, and file-level control totals."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from achfile.core.types import Cents
from achfile.models.codes import ServiceClassCode, StandardEntryClass
from achfile.models.entry import Entry

ENTRY_HASH_MODULUS = 10_000_000_000
MAX_BATCH_RECORDS = 999_999  # 6-digit entry/addenda count in the batch control
MAX_TOTAL_CENTS = 999_999_999_999  # 12-digit debit/credit totals
MAX_BATCHES = 999_999  # 6-digit batch count in the file control
MAX_BLOCKS = 999_999  # 6-digit block count in the file control
BLOCKING_FACTOR = 10
FIXED_RECORDS_PER_FILE = 2  # file header + file control
FIXED_RECORDS_PER_BATCH = 2  # batch header + batch control


class BatchHeader(BaseModel):
    """Fully resolved batch header fields."""

    model_config = {"frozen": True}

    batch_number: int
    service_class_code: ServiceClassCode
    company_name: str
    company_discretionary_data: str
    company_identification: str
    standard_entry_class_code: StandardEntryClass
    company_entry_description: str
    company_descriptive_date: date
    effective_entry_date: date
    originator_status_code: str
    originating_dfi_id: str


class BatchHandle(BaseModel):
    """Caller-side reference to a batch owned by one encoder."""

    model_config = {"frozen": True}

    file_id: str
    batch_number: int


class Batch(BaseModel):
    """Immutable snapshot of a batch's running control totals.

    Entries themselves live in the encoder's append-only entry list; the
    snapshot records how many of them belong to the batch.
    """

    model_config = {"frozen": True}

    header: BatchHeader
    size: int = 0  # entry detail records committed
    entry_count: int = 0  # entry detail + addenda records
    entry_hash: int = 0
    total_debit: Cents = 0
    total_credit: Cents = 0

    @property
    def batch_number(self) -> int:
        return self.header.batch_number

    @property
    def next_sequence(self) -> int:
        return self.size + 1

    @property
    def record_count(self) -> int:
        return FIXED_RECORDS_PER_BATCH + self.entry_count

    def with_entry(self, entry: Entry) -> Batch:
        """Return a new snapshot with ``entry`` counted; constant cost per entry."""
        return self.model_copy(update={
            "size": self.size + 1,
            "entry_count": self.entry_count + entry.record_count,
            "entry_hash": _add_hash(self.entry_hash, entry),
            "total_debit": self.total_debit + (entry.amount if entry.is_debit else 0),
            "total_credit": self.total_credit + (0 if entry.is_debit else entry.amount),
        })


class FileTotals(BaseModel):
    """Running control totals for the file control record."""

    model_config = {"frozen": True}

    batch_count: int = 0
    entry_count: int = 0
    entry_hash: int = 0
    total_debit: Cents = 0
    total_credit: Cents = 0

    def with_batch(self) -> FileTotals:
        return self.model_copy(update={"batch_count": self.batch_count + 1})

    def with_entry(self, entry: Entry) -> FileTotals:
        return self.model_copy(update={
            "entry_count": self.entry_count + entry.record_count,
            "entry_hash": _add_hash(self.entry_hash, entry),
            "total_debit": self.total_debit + (entry.amount if entry.is_debit else 0),
            "total_credit": self.total_credit + (0 if entry.is_debit else entry.amount),
        })

    @property
    def record_count(self) -> int:
        """Records before block padding."""
        return FIXED_RECORDS_PER_FILE + FIXED_RECORDS_PER_BATCH * self.batch_count + self.entry_count

    @property
    def block_count(self) -> int:
        return -(-self.record_count // BLOCKING_FACTOR)


def _add_hash(entry_hash: int, entry: Entry) -> int:
    return (entry_hash + int(entry.receiving_dfi_id)) % ENTRY_HASH_MODULUS
