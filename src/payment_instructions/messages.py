from __future__ import annotations

from enum import Enum


class StatusCode(str, Enum):
    """Códigos estables; el texto de los mensajes puede cambiar, estos no."""

    EXECUTED = "AP00"
    PENDING = "AP02"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"
    INVALID_AMOUNT = "AM01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"
    INVALID_DATE_FORMAT = "DT01"


class PaymentMessages:
    SUCCESS_EXECUTED = "Transaction executed successfully"
    SUCCESS_PENDING = "Transaction scheduled for future execution"
    INVALID_KEYWORD_ORDER = "Invalid keyword order"
    MALFORMED_INSTRUCTION = "Malformed instruction"
    INVALID_AMOUNT = "Invalid amount"
    CURRENCY_MISMATCH = "Account currency mismatch"
    UNSUPPORTED_CURRENCY = "Unsupported currency"
    INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
    SAME_ACCOUNT = "Debit and credit accounts cannot be the same"
    ACCOUNT_NOT_FOUND = "Account not found"
    INVALID_ACCOUNT_ID = "Invalid account ID format"
    INVALID_DATE_FORMAT = "Invalid date format"
