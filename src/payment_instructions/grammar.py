"""
Gramática posicional de instrucciones de pago.

Dos formas de oración, con cláusula de fecha opcional al final:

    DEBIT  <amount> <currency> from account <debit-id> for credit to account <credit-id> [on YYYY-MM-DD]
    CREDIT <amount> <currency> to account <credit-id> for debit from account <debit-id> [on YYYY-MM-DD]

La máquina es una secuencia fija de pasos (tipo -> monto -> moneda ->
keywords -> fecha -> fin). Cada paso avanza el cursor o lanza
InstructionError; no hay backtracking.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .errors import InstructionError
from .messages import PaymentMessages, StatusCode
from .models import ParsedInstruction
from .settings import ProcessorSettings, has_date_shape
from .tokens import Cursor, TokenStream


AMOUNT_RE = re.compile(r"[0-9]+")

# Tope de dígitos significativos; 640 es el mínimo configurable del límite de int() en CPython
MAX_AMOUNT_DIGITS = 640

# Marcadores de posición para los ids dentro de la secuencia de keywords
DEBIT_ID = "<debit-id>"
CREDIT_ID = "<credit-id>"

CLAUSES: Dict[str, Tuple[str, ...]] = {
    "DEBIT": ("from", "account", DEBIT_ID, "for", "credit", "to", "account", CREDIT_ID),
    "CREDIT": ("to", "account", CREDIT_ID, "for", "debit", "from", "account", DEBIT_ID),
}

DATE_KEYWORD = "on"


@dataclass
class _Draft:
    type: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None


def _keyword_order_error() -> InstructionError:
    return InstructionError(StatusCode.INVALID_KEYWORD_ORDER, PaymentMessages.INVALID_KEYWORD_ORDER)


def read_type(cursor: Cursor, draft: _Draft, settings: ProcessorSettings) -> None:
    word = cursor.take_lower()
    if word not in ("debit", "credit"):
        raise InstructionError.malformed()
    draft.type = word.upper()


def read_amount(cursor: Cursor, draft: _Draft, settings: ProcessorSettings) -> None:
    word = cursor.take()
    if word is None:
        raise InstructionError.malformed()
    # Solo dígitos ASCII; sin decimales ni signo
    if not AMOUNT_RE.fullmatch(word):
        raise InstructionError(StatusCode.INVALID_AMOUNT, PaymentMessages.INVALID_AMOUNT)
    digits = word.lstrip("0") or "0"
    if len(digits) > MAX_AMOUNT_DIGITS:
        raise InstructionError(StatusCode.INVALID_AMOUNT, PaymentMessages.INVALID_AMOUNT)
    amount = int(digits)
    if amount <= 0:
        raise InstructionError(StatusCode.INVALID_AMOUNT, PaymentMessages.INVALID_AMOUNT)
    draft.amount = amount


def read_currency(cursor: Cursor, draft: _Draft, settings: ProcessorSettings) -> None:
    word = cursor.take()
    if word is None:
        raise InstructionError.malformed()
    currency = word.upper()
    if currency not in settings.supported_currencies:
        raise InstructionError(StatusCode.UNSUPPORTED_CURRENCY, PaymentMessages.UNSUPPORTED_CURRENCY)
    draft.currency = currency


def read_clause(cursor: Cursor, draft: _Draft, settings: ProcessorSettings) -> None:
    for slot in CLAUSES[draft.type]:
        if slot in (DEBIT_ID, CREDIT_ID):
            value = cursor.take()
            if value is None:
                raise _keyword_order_error()
            if slot == DEBIT_ID:
                draft.debit_account = value
            else:
                draft.credit_account = value
        elif cursor.take_lower() != slot:
            raise _keyword_order_error()


def read_date(cursor: Cursor, draft: _Draft, settings: ProcessorSettings) -> None:
    if cursor.peek_lower() != DATE_KEYWORD:
        return
    cursor.take()
    value = cursor.take()
    if value is None or not has_date_shape(value):
        raise InstructionError(StatusCode.INVALID_DATE_FORMAT, PaymentMessages.INVALID_DATE_FORMAT)
    draft.execute_by = value


def expect_end(cursor: Cursor, draft: _Draft, settings: ProcessorSettings) -> None:
    if not cursor.exhausted:
        raise InstructionError.malformed()


Step = Callable[[Cursor, _Draft, ProcessorSettings], None]

STEPS: Tuple[Step, ...] = (
    read_type,
    read_amount,
    read_currency,
    read_clause,
    read_date,
    expect_end,
)


def parse_tokens(stream: TokenStream, settings: ProcessorSettings) -> ParsedInstruction:
    cursor = Cursor(stream)
    draft = _Draft()
    for step in STEPS:
        step(cursor, draft, settings)

    return ParsedInstruction(
        type=draft.type,
        amount=draft.amount,
        currency=draft.currency,
        debit_account=draft.debit_account,
        credit_account=draft.credit_account,
        execute_by=draft.execute_by,
    )
