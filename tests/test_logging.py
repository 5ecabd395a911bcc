from __future__ import annotations

import json
import logging

import pytest

from payment_instructions.logging_setup import configure_logging
from payment_instructions.messages import PaymentMessages, StatusCode
from payment_instructions.processor import process_instruction


BODY = {
    "instruction": "debit 5 USD from account A1 for credit to account A2",
    "accounts": [
        {"id": "A1", "balance": 10, "currency": "USD"},
        {"id": "A2", "balance": 0, "currency": "USD"},
    ],
}


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    pkg = logging.getLogger("payment_instructions")
    handlers, root_level, pkg_level = list(root.handlers), root.level, pkg.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(root_level)
        pkg.setLevel(pkg_level)


def test_verbose_json_logs_go_to_stderr(capsys, restore_logging, settings):
    configure_logging(verbose=True, log_json=True)

    process_instruction(BODY, settings)
    captured = capsys.readouterr()

    assert captured.out == ""
    events = [json.loads(line) for line in captured.err.splitlines() if line.strip()]
    assert any("instruction_processed" in e["event"] and e["level"] == "debug" for e in events)
    assert all(e["logger"].startswith("payment_instructions") for e in events)


def test_default_level_hides_debug(capsys, restore_logging, settings):
    configure_logging()

    process_instruction(BODY, settings)
    captured = capsys.readouterr()

    assert captured.out == ""
    assert "instruction_processed" not in captured.err


def test_catalog_covers_exactly_the_outcomes():
    names = {n for n in vars(PaymentMessages) if n.isupper()}
    failures = {c.name for c in StatusCode if c not in (StatusCode.EXECUTED, StatusCode.PENDING)}

    assert names == failures | {"SUCCESS_EXECUTED", "SUCCESS_PENDING"}
