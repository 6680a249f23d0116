"""Renderers for the six NACHA record types plus block filler.

Every function returns exactly ``RECORD_SIZE`` characters.
"""

from __future__ import annotations

from achfile.codec.fields import alpha, blank, hhmm, numeric, yymmdd
from achfile.core.types import Record
from achfile.models.batch import BLOCKING_FACTOR, Batch, BatchHeader, FileTotals
from achfile.models.entry import Entry
from achfile.models.settings import FileSettings

RECORD_SIZE = 94
FORMAT_CODE = "1"
PRIORITY_CODE = "01"
ADDENDA_TYPE_CODE = "05"
FILLER_RECORD = "9" * RECORD_SIZE


def _record(*fields: str) -> Record:
    record = "".join(fields)
    if len(record) != RECORD_SIZE:
        raise ValueError(f"record type {record[:1]!r} rendered {len(record)} characters")
    return record


def _routing_field(number: str) -> str:
    """Render a 10-character immediate destination or origin field.

    Routing numbers are written as a blank followed by 9 zero-padded digits.
    A 10-digit immediate origin (a company tax ID, for example) fills the
    whole field and is written without the leading blank.
    """
    if len(number) == 10:
        return number
    return " " + numeric(number, 9)


def file_header(settings: FileSettings) -> Record:
    return _record(
        "1",
        PRIORITY_CODE,
        _routing_field(settings.immediate_destination),
        _routing_field(settings.immediate_origin),
        yymmdd(settings.file_creation_date),
        hhmm(settings.file_creation_time),
        settings.file_id_modifier,
        numeric(RECORD_SIZE, 3),
        numeric(BLOCKING_FACTOR, 2),
        FORMAT_CODE,
        alpha(settings.immediate_destination_name, 23),
        alpha(settings.origin_name, 23),
        alpha(settings.reference_code, 8),
    )


def batch_header(header: BatchHeader) -> Record:
    return _record(
        "5",
        header.service_class_code.value,
        alpha(header.company_name, 16),
        alpha(header.company_discretionary_data, 20),
        numeric(header.company_identification, 10),
        header.standard_entry_class_code.value,
        alpha(header.company_entry_description, 10),
        yymmdd(header.company_descriptive_date),
        yymmdd(header.effective_entry_date),
        blank(3),  # settlement date, filled in by the ACH operator
        header.originator_status_code,
        numeric(header.originating_dfi_id, 8),
        numeric(header.batch_number, 7),
    )


def entry_detail(entry: Entry) -> Record:
    return _record(
        "6",
        entry.transaction_code.value,
        entry.receiving_dfi_id,
        entry.check_digit,
        alpha(entry.account_number, 17),
        numeric(entry.amount, 10),
        alpha(entry.receiving_company_id, 15),
        alpha(entry.receiving_company_name, 22),
        alpha(entry.discretionary_data, 2),
        "1" if entry.has_addenda else "0",
        entry.trace_number,
    )


def addenda(entry: Entry) -> Record:
    return _record(
        "7",
        ADDENDA_TYPE_CODE,
        alpha(entry.addenda, 80),
        numeric(1, 4),
        entry.trace_number[-7:],
    )


def batch_control(batch: Batch) -> Record:
    header = batch.header
    return _record(
        "8",
        header.service_class_code.value,
        numeric(batch.entry_count, 6),
        numeric(batch.entry_hash, 10),
        numeric(batch.total_debit, 12),
        numeric(batch.total_credit, 12),
        numeric(header.company_identification, 10),
        blank(19),  # message authentication code
        blank(6),  # reserved
        numeric(header.originating_dfi_id, 8),
        numeric(header.batch_number, 7),
    )


def file_control(totals: FileTotals) -> Record:
    return _record(
        "9",
        numeric(totals.batch_count, 6),
        numeric(totals.block_count, 6),
        numeric(totals.entry_count, 8),
        numeric(totals.entry_hash, 10),
        numeric(totals.total_debit, 12),
        numeric(totals.total_credit, 12),
        blank(39),
    )
