"""Tests for entry and batch models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pydantic
import pytest

from achfile.models.batch import ENTRY_HASH_MODULUS, Batch, BatchHeader, FileTotals
from achfile.models.codes import ServiceClassCode, StandardEntryClass, TransactionCode
from achfile.models.entry import Entry, EntryData, to_cents, trace_number


def _header(batch_number: int = 1) -> BatchHeader:
    return BatchHeader(
        batch_number=batch_number,
        service_class_code=ServiceClassCode.MIXED,
        company_name="ACME NPO",
        company_discretionary_data="",
        company_identification="1234567890",
        standard_entry_class_code=StandardEntryClass.CCD,
        company_entry_description="PAYMENT",
        company_descriptive_date=date(2026, 3, 14),
        effective_entry_date=date(2026, 3, 14),
        originator_status_code="1",
        originating_dfi_id="12345678",
    )


def _entry(sequence: int = 1, code: TransactionCode = TransactionCode.CHECKING_CREDIT,
           amount: int = 5000, addenda: str | None = None) -> Entry:
    return Entry(
        sequence=sequence,
        transaction_code=code,
        routing_number="021000021",
        account_number="00012345",
        amount=amount,
        receiving_company_id="V001",
        receiving_company_name="Widget Co",
        addenda=addenda,
        trace_number=trace_number("12345678", sequence),
    )


class TestToCents:
    @pytest.mark.parametrize(
        ("amount", "cents"),
        [("100.00", 10000), ("0.01", 1), ("12.345", 1235), ("12.344", 1234), ("7", 700)],
    )
    def test_rounds_half_up(self, amount, cents):
        assert to_cents(Decimal(amount)) == cents


class TestEntryData:
    def test_float_amount_accepted(self):
        data = EntryData(routing_number="021000021", account_number="1", amount=50.0,
                         receiving_company_name="Widget Co", vendor_id="V001")
        assert data.cents == 5000

    def test_strips_whitespace(self):
        data = EntryData(routing_number="021000021", account_number=" 123 ", amount="1",
                         receiving_company_name=" Widget Co ", vendor_id="V001")
        assert data.account_number == "123"
        assert data.receiving_company_name == "Widget Co"

    def test_default_transaction_code_is_checking_credit(self):
        data = EntryData(routing_number="021000021", account_number="1", amount="1",
                         receiving_company_name="Widget Co", vendor_id="V001")
        assert data.transaction_code is TransactionCode.CHECKING_CREDIT

    def test_unknown_field_rejected(self):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            EntryData(routing_number="021000021", account_number="1", amount="1",
                      receiving_company_name="Widget Co", vendor_id="V001", adenda="INV 1")
        assert exc_info.value.errors()[0]["loc"] == ("adenda",)


class TestEntry:
    def test_routing_split(self):
        entry = _entry()
        assert entry.receiving_dfi_id == "02100002"
        assert entry.check_digit == "1"

    def test_blank_addenda_means_none(self):
        data = EntryData(routing_number="021000021", account_number="1", amount="1",
                         receiving_company_name="Widget Co", vendor_id="V001", addenda="")
        entry = Entry.from_data(data, sequence=1, originating_dfi_id="12345678")
        assert entry.addenda is None
        assert entry.record_count == 1

    def test_trace_number(self):
        assert trace_number("12345678", 1) == "123456780000001"
        assert trace_number("12345678", 1234567) == "123456781234567"


class TestTransactionCodes:
    @pytest.mark.parametrize("code", ["27", "28", "37", "38", "47"])
    def test_debit_codes(self, code):
        assert TransactionCode(code).is_debit

    @pytest.mark.parametrize("code", ["22", "23", "32", "33", "42"])
    def test_credit_codes(self, code):
        assert not TransactionCode(code).is_debit

    def test_service_class_allows(self):
        assert ServiceClassCode.MIXED.allows(TransactionCode.GL_DEBIT)
        assert ServiceClassCode.CREDITS_ONLY.allows(TransactionCode.SAVINGS_CREDIT)
        assert not ServiceClassCode.CREDITS_ONLY.allows(TransactionCode.SAVINGS_DEBIT)
        assert not ServiceClassCode.DEBITS_ONLY.allows(TransactionCode.CHECKING_CREDIT)


class TestBatch:
    def test_with_entry_returns_new_snapshot(self):
        empty = Batch(header=_header())
        updated = empty.with_entry(_entry(addenda="memo"))
        assert empty.size == 0
        assert empty.entry_count == 0
        assert updated.size == 1
        assert updated.entry_count == 2
        assert updated.entry_hash == 2100002
        assert updated.total_credit == 5000
        assert updated.next_sequence == 2

    def test_snapshot_does_not_hold_entries(self):
        assert "entries" not in Batch.model_fields

    def test_debits_and_credits_split(self):
        batch = (
            Batch(header=_header())
            .with_entry(_entry(1, TransactionCode.CHECKING_CREDIT, 1000))
            .with_entry(_entry(2, TransactionCode.CHECKING_DEBIT, 250))
            .with_entry(_entry(3, TransactionCode.GL_DEBIT, 5))
        )
        assert batch.total_credit == 1000
        assert batch.total_debit == 255

    def test_hash_wraps(self):
        batch = Batch(header=_header(), entry_hash=ENTRY_HASH_MODULUS - 1)
        assert batch.with_entry(_entry()).entry_hash == 2100001


class TestFileTotals:
    def test_record_and_block_counts(self):
        totals = (
            FileTotals()
            .with_batch().with_entry(_entry())
            .with_batch().with_entry(_entry(addenda="memo"))
        )
        assert totals.batch_count == 2
        assert totals.entry_count == 3
        assert totals.entry_hash == 2 * 2100002
        assert totals.total_credit == 10000
        assert totals.record_count == 2 + 4 + 3
        assert totals.block_count == 1

    def test_empty_file(self):
        totals = FileTotals()
        assert totals.record_count == 2
        assert totals.block_count == 1

    def test_eleven_records_need_two_blocks(self):
        assert FileTotals(batch_count=1, entry_count=7).block_count == 2

    def test_hash_wraps(self):
        totals = FileTotals(entry_hash=ENTRY_HASH_MODULUS - 1).with_entry(_entry())
        assert totals.entry_hash == 2100001

    def test_totals_are_immutable(self):
        totals = FileTotals()
        with pytest.raises(Exception):
            totals.batch_count = 1
