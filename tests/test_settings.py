from __future__ import annotations

import pytest
from pydantic import ValidationError

from payment_instructions.settings import DEFAULT_CURRENT_DATE, ProcessorSettings, has_date_shape


def test_defaults():
    s = ProcessorSettings()

    assert s.current_date == DEFAULT_CURRENT_DATE
    assert s.supported_currencies == ("USD", "NGN", "GBP", "GHS")
    assert "@" in s.account_id_chars
    assert "#" not in s.account_id_chars


def test_env_override(monkeypatch):
    monkeypatch.setenv("PAYMENT_INSTRUCTIONS_CURRENT_DATE", "2031-01-01")

    assert ProcessorSettings().current_date == "2031-01-01"


def test_rejects_bad_current_date():
    with pytest.raises(ValidationError):
        ProcessorSettings(current_date="tomorrow")


def test_settings_are_frozen():
    s = ProcessorSettings()

    with pytest.raises(ValidationError):
        s.current_date = "2000-01-01"


@pytest.mark.parametrize("value, ok", [("2025-11-14", True), ("2025-99-99", True), ("2025/11/14", False), ("", False)])
def test_has_date_shape(value, ok):
    assert has_date_shape(value) is ok
