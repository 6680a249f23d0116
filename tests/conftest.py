"""Shared fixtures: a fixed clock, canonical file settings, and an encoder."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from achfile.codec.encoder import NachaFileEncoder
from achfile.persistence.memory_backend import MemoryFileStore

FIXED_NOW = datetime(2026, 3, 14, 9, 26, 53)

VALID_ROUTING = "021000021"


@pytest.fixture
def file_settings() -> dict[str, Any]:
    return {
        "immediate_destination": "123456780",
        "immediate_origin": "987654321",
        "company_name": "ACME NPO",
        "company_identification": "1234567890",
        "originating_dfi_id": "12345678",
    }


@pytest.fixture
def entry_data() -> dict[str, Any]:
    return {
        "routing_number": VALID_ROUTING,
        "account_number": "00012345",
        "amount": "50.00",
        "receiving_company_name": "Widget Co",
        "vendor_id": "V001",
    }


@pytest.fixture
def file_store() -> MemoryFileStore:
    return MemoryFileStore()


@pytest.fixture
def encoder(file_settings, file_store) -> NachaFileEncoder:
    return NachaFileEncoder(file_settings, file_store=file_store, clock=lambda: FIXED_NOW)
