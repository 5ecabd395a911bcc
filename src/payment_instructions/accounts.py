from __future__ import annotations

import math
from typing import Any, Dict, List, Sequence

from .errors import AccountShapeError
from .models import Account


def _is_number(value: Any) -> bool:
    # bool es subclase de int, pero no es un balance
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def normalize_accounts(raw_accounts: Any) -> List[Account]:
    """
    Valida el snapshot de cuentas del request y lo normaliza:
    - id: string no vacío (después de strip)
    - balance: número >= 0
    - currency: string, se pasa a mayúsculas
    Cualquier falla => AccountShapeError (AC03) nombrando la cuenta.
    """
    if not isinstance(raw_accounts, list):
        raise AccountShapeError("Accounts must be a list")

    out: List[Account] = []
    for raw in raw_accounts:
        if not isinstance(raw, dict):
            raise AccountShapeError(f"Account entry is invalid: {raw!r}")

        acc_id = raw.get("id")
        if not isinstance(acc_id, str) or not acc_id.strip():
            raise AccountShapeError(f"Account ID is invalid: {acc_id}")

        balance = raw.get("balance")
        if not _is_number(balance) or balance < 0:
            raise AccountShapeError(f"Account balance invalid for {acc_id}")

        currency = raw.get("currency")
        if not isinstance(currency, str):
            raise AccountShapeError(f"Account currency invalid for {acc_id}")

        out.append(Account(id=acc_id, balance=balance, currency=currency.upper()))

    return out


def index_accounts(accounts: Sequence[Account]) -> Dict[str, Account]:
    # Con ids duplicados gana la primera aparición
    table: Dict[str, Account] = {}
    for acc in accounts:
        table.setdefault(acc.id, acc)
    return table
