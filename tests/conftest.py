from __future__ import annotations

import pytest

from payment_instructions.settings import ProcessorSettings


@pytest.fixture
def settings() -> ProcessorSettings:
    return ProcessorSettings(current_date="2025-11-14")


@pytest.fixture
def ledger() -> list:
    return [
        {"id": "A1", "balance": 1000, "currency": "usd"},
        {"id": "A2", "balance": 200, "currency": "USD"},
        {"id": "B1", "balance": 300, "currency": "GBP"},
        {"id": "N1", "balance": 5000, "currency": "NGN"},
    ]
