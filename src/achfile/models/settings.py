"""File-level settings and per-batch header overrides."""

from __future__ import annotations

from datetime import date, time
from typing import Optional

from pydantic import BaseModel, Field

from achfile.models.codes import ServiceClassCode, StandardEntryClass
from achfile.models.common import AsciiText

NINE_DIGITS = r"^[0-9]{9}$"
EIGHT_DIGITS = r"^[0-9]{8}$"


class FileSettings(BaseModel):
    """Immutable file context: routing numbers, company identity, dates.

    Creation date and time are left ``None`` by callers that want the
    encoder to stamp them when it is configured.
    """

    model_config = {"frozen": True, "str_strip_whitespace": True, "extra": "forbid"}

    # --- Required ---
    immediate_destination: str = Field(pattern=NINE_DIGITS)
    # A 10-digit origin fills its field with no leading blank.
    immediate_origin: str = Field(pattern=r"^[0-9]{1,10}$")
    company_name: AsciiText = Field(min_length=1)
    company_identification: AsciiText = Field(min_length=1, max_length=10)
    originating_dfi_id: str = Field(pattern=EIGHT_DIGITS)

    # --- File header ---
    immediate_destination_name: AsciiText = ""
    immediate_origin_name: AsciiText = ""  # blank means company_name
    reference_code: AsciiText = ""
    file_id_modifier: str = Field(default="A", pattern=r"^[A-Z0-9]$")
    file_creation_date: Optional[date] = None
    file_creation_time: Optional[time] = None

    # --- Batch header defaults ---
    company_discretionary_data: AsciiText = ""
    standard_entry_class_code: StandardEntryClass = StandardEntryClass.CCD
    company_entry_description: AsciiText = "PAYMENT"
    company_descriptive_date: Optional[date] = None
    effective_entry_date: Optional[date] = None
    originator_status_code: str = Field(default="1", pattern=r"^[0-9]$")

    @property
    def origin_name(self) -> str:
        return self.immediate_origin_name or self.company_name


class BatchOptions(BaseModel):
    """Overrides for a single batch header; anything unset comes from the file."""

    model_config = {"frozen": True, "str_strip_whitespace": True, "extra": "forbid"}

    service_class_code: Optional[ServiceClassCode] = None
    company_name: Optional[AsciiText] = Field(default=None, min_length=1)
    company_discretionary_data: Optional[AsciiText] = None
    company_identification: Optional[AsciiText] = Field(default=None, min_length=1, max_length=10)
    standard_entry_class_code: Optional[StandardEntryClass] = None
    company_entry_description: Optional[AsciiText] = None
    company_descriptive_date: Optional[date] = None
    effective_entry_date: Optional[date] = None
    originator_status_code: Optional[str] = Field(default=None, pattern=r"^[0-9]$")
    originating_dfi_id: Optional[str] = Field(default=None, pattern=EIGHT_DIGITS)
