from __future__ import annotations

from typing import Dict, Tuple

from .errors import InstructionError
from .messages import PaymentMessages, StatusCode
from .models import Account, ParsedInstruction
from .settings import ProcessorSettings


def check_account_id(account_id: str, allowed: str) -> bool:
    return all(ch in allowed for ch in account_id)


def validate_instruction(
    parsed: ParsedInstruction,
    table: Dict[str, Account],
    settings: ProcessorSettings,
) -> Tuple[Account, Account]:
    """
    Validación semántica después del parseo. El orden importa (cada falla corta):
    1) charset de ids  2) existencia  3) moneda  4) misma cuenta
    Devuelve (cuenta_debito, cuenta_credito).
    """
    for account_id in (parsed.debit_account, parsed.credit_account):
        if not check_account_id(account_id, settings.account_id_chars):
            raise InstructionError(StatusCode.INVALID_ACCOUNT_ID, PaymentMessages.INVALID_ACCOUNT_ID)

    debit = table.get(parsed.debit_account)
    credit = table.get(parsed.credit_account)
    if debit is None or credit is None:
        raise InstructionError(StatusCode.ACCOUNT_NOT_FOUND, PaymentMessages.ACCOUNT_NOT_FOUND)

    if debit.currency != parsed.currency or credit.currency != parsed.currency:
        raise InstructionError(StatusCode.CURRENCY_MISMATCH, PaymentMessages.CURRENCY_MISMATCH)

    if parsed.debit_account == parsed.credit_account:
        raise InstructionError(StatusCode.SAME_ACCOUNT, PaymentMessages.SAME_ACCOUNT)

    return debit, credit
