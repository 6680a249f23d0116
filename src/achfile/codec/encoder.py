"""NachaFileEncoder: accumulates batches and entries, serializes the ACH file.

NACHA COMPLIANCE: receiving account numbers are held in memory only and are
never logged.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

import pydantic

from achfile.codec import records
from achfile.core.config import AppSettings
from achfile.core.exceptions import BatchNotFoundError, ConfigurationError, ValidationError
from achfile.core.protocols import IFileStore
from achfile.models.batch import (
    BLOCKING_FACTOR,
    MAX_BATCH_RECORDS,
    MAX_BATCHES,
    MAX_BLOCKS,
    MAX_TOTAL_CENTS,
    Batch,
    BatchHandle,
    BatchHeader,
    FileTotals,
)
from achfile.models.entry import Entry, EntryData
from achfile.models.settings import BatchOptions, FileSettings
from achfile.persistence import create_file_store

logger = logging.getLogger(__name__)


def _error_fields(exc: pydantic.ValidationError) -> list[str]:
    fields: list[str] = []
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "__root__"
        if name not in fields:
            fields.append(name)
    return fields


class NachaFileEncoder:
    """Builds one NACHA file: File owns Batches, Batches own Entries.

    Batches are stored as immutable snapshots of their control totals, indexed
    by ``batch_number - 1``, next to one append-only entry list per batch.
    Adding an entry builds the replacement batch snapshot and file totals
    first, and commits entry, snapshot and totals only when every check has
    passed. Each commit costs the same however many entries exist.
    """

    def __init__(
        self,
        settings: FileSettings | Mapping[str, Any] | None = None,
        *,
        config: AppSettings | None = None,
        file_store: IFileStore | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._config = config or AppSettings()
        self._file_store = file_store
        self._clock = clock
        self._file_id = uuid.uuid4().hex
        self._settings: FileSettings | None = None
        self._batches: list[Batch] = []
        self._entries: list[list[Entry]] = []
        self._totals = FileTotals()
        if settings is not None:
            self.configure(settings)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def settings(self) -> FileSettings:
        if self._settings is None:
            raise ConfigurationError("NACHA file settings have not been configured")
        return self._settings

    def configure(self, settings: FileSettings | Mapping[str, Any]) -> FileSettings:
        """Validate and store file-level settings, stamping creation date/time."""
        if self._batches:
            raise ConfigurationError("File settings cannot change once batches exist")

        if isinstance(settings, FileSettings):
            resolved = settings
        else:
            values = {**self._config.nacha.file_defaults(), **_present(settings)}
            try:
                resolved = FileSettings.model_validate(values)
            except pydantic.ValidationError as exc:
                raise ConfigurationError("Invalid NACHA settings", _error_fields(exc)) from exc

        now = self._clock()
        creation_date = resolved.file_creation_date or now.date()
        resolved = resolved.model_copy(update={
            "file_creation_date": creation_date,
            "file_creation_time": resolved.file_creation_time or now.time().replace(second=0, microsecond=0),
            "company_descriptive_date": resolved.company_descriptive_date or creation_date,
            "effective_entry_date": resolved.effective_entry_date or creation_date,
        })

        self._settings = resolved
        logger.info(
            "Configured NACHA file for %s (destination %s, modifier %s)",
            resolved.company_name, resolved.immediate_destination, resolved.file_id_modifier,
        )
        return resolved

    # ------------------------------------------------------------------
    # Batches and entries
    # ------------------------------------------------------------------

    @property
    def batches(self) -> tuple[Batch, ...]:
        return tuple(self._batches)

    def create_batch(self, options: BatchOptions | Mapping[str, Any] | None = None) -> BatchHandle:
        """Open a new batch numbered after the batches created so far (1-based)."""
        settings = self.settings
        if options is None:
            options = BatchOptions()
        elif not isinstance(options, BatchOptions):
            try:
                options = BatchOptions.model_validate(_present(options))
            except pydantic.ValidationError as exc:
                raise ConfigurationError("Invalid batch options", _error_fields(exc)) from exc

        nacha = self._config.nacha
        batch_number = len(self._batches) + 1
        totals = self._totals.with_batch()
        if batch_number > MAX_BATCHES or totals.block_count > MAX_BLOCKS:
            raise ConfigurationError("File cannot hold another batch")
        try:
            header = BatchHeader(
                batch_number=batch_number,
                service_class_code=options.service_class_code or nacha.service_class_code,
                company_name=options.company_name or settings.company_name,
                company_discretionary_data=_pick(options.company_discretionary_data,
                                                  settings.company_discretionary_data),
                company_identification=options.company_identification or settings.company_identification,
                standard_entry_class_code=options.standard_entry_class_code
                or settings.standard_entry_class_code,
                company_entry_description=_pick(options.company_entry_description,
                                                settings.company_entry_description),
                company_descriptive_date=options.company_descriptive_date
                or settings.company_descriptive_date,
                effective_entry_date=options.effective_entry_date or settings.effective_entry_date,
                originator_status_code=options.originator_status_code or settings.originator_status_code,
                originating_dfi_id=options.originating_dfi_id or settings.originating_dfi_id,
            )
        except pydantic.ValidationError as exc:
            raise ConfigurationError("Invalid batch options", _error_fields(exc)) from exc

        self._batches.append(Batch(header=header))
        self._entries.append([])
        self._totals = totals
        logger.info(
            "Created batch %07d (%s %s)",
            batch_number, header.standard_entry_class_code, header.service_class_code,
        )
        return BatchHandle(file_id=self._file_id, batch_number=batch_number)

    def get_batch(self, handle: BatchHandle) -> Batch:
        return self._batches[self._index(handle)]

    def entries(self, handle: BatchHandle) -> tuple[Entry, ...]:
        """Committed entries of one batch, in sequence order."""
        return tuple(self._entries[self._index(handle)])

    def add_entry(self, handle: BatchHandle, entry_data: EntryData | Mapping[str, Any]) -> Entry:
        """Validate and append one payment; the batch is untouched on failure."""
        index = self._index(handle)
        batch = self._batches[index]

        if isinstance(entry_data, EntryData):
            data = entry_data
        else:
            values = {"transaction_code": self._config.nacha.transaction_code, **_present(entry_data)}
            try:
                data = EntryData.model_validate(values)
            except pydantic.ValidationError as exc:
                raise ValidationError("Invalid entry", _error_fields(exc)) from exc

        if not batch.header.service_class_code.allows(data.transaction_code):
            raise ValidationError(
                f"Transaction code {data.transaction_code} not allowed in "
                f"service class {batch.header.service_class_code} batch",
                ["transaction_code"],
            )

        entry = Entry.from_data(
            data,
            sequence=batch.next_sequence,
            originating_dfi_id=batch.header.originating_dfi_id,
        )
        updated = batch.with_entry(entry)
        totals = self._totals.with_entry(entry)
        _check_capacity(updated, totals)

        self._entries[index].append(entry)
        self._batches[index] = updated
        self._totals = totals
        logger.debug(
            "Batch %07d entry %d: %s to RDFI %s, %d cents",
            updated.batch_number, entry.sequence, entry.transaction_code,
            entry.receiving_dfi_id, entry.amount,
        )
        return entry

    def _index(self, handle: BatchHandle) -> int:
        if handle.file_id != self._file_id or not 1 <= handle.batch_number <= len(self._batches):
            raise BatchNotFoundError(handle.batch_number)
        return handle.batch_number - 1

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def totals(self) -> FileTotals:
        return self._totals

    def generate_file(self) -> str:
        """Serialize the accumulated state. Pure: repeated calls give identical text."""
        totals = self.totals()
        lines = [records.file_header(self.settings)]
        for batch, entries in zip(self._batches, self._entries):
            lines.append(records.batch_header(batch.header))
            for entry in entries:
                lines.append(records.entry_detail(entry))
                if entry.has_addenda:
                    lines.append(records.addenda(entry))
            lines.append(records.batch_control(batch))
        lines.append(records.file_control(totals))

        padding = totals.block_count * BLOCKING_FACTOR - len(lines)
        lines.extend([records.FILLER_RECORD] * padding)

        logger.info(
            "Generated NACHA file: %d batches, %d entries, %d blocks",
            totals.batch_count, totals.entry_count, totals.block_count,
        )
        return "".join(lines)

    async def write_file(self, path: str) -> str:
        """Persist ``generate_file()`` output; storage errors propagate unmodified."""
        if self._file_store is None:
            self._file_store = create_file_store(self._config)

        data = self.generate_file().encode("ascii")
        stored = await asyncio.to_thread(self._file_store.write, path, data, "text/plain")
        logger.info("Wrote NACHA file to %s (%d bytes)", stored, len(data))
        return stored


def _check_capacity(batch: Batch, totals: FileTotals) -> None:
    if batch.entry_count > MAX_BATCH_RECORDS:
        raise ValidationError("Batch is full", ["entries"])
    if max(totals.total_debit, totals.total_credit) > MAX_TOTAL_CENTS:
        raise ValidationError("Control total would overflow", ["amount"])
    if totals.block_count > MAX_BLOCKS:
        raise ValidationError("File is full", ["entries"])


def _pick(override: str | None, default: str) -> str:
    # Blank is a legitimate override for optional text fields.
    return default if override is None else override


def _present(values: Mapping[str, Any]) -> dict[str, Any]:
    # None means "not supplied", so defaults apply and required fields read as missing.
    return {key: value for key, value in values.items() if value is not None}
