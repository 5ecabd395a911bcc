from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import InstructionError
from .messages import PaymentMessages, StatusCode
from .models import Account, AccountDelta, ExecutionResult, ParsedInstruction
from .settings import ProcessorSettings


def should_execute_now(execute_by: Optional[str], current_date: str) -> bool:
    # Comparación lexicográfica: funciona porque ambos son YYYY-MM-DD
    return execute_by is None or execute_by <= current_date


def project_accounts(
    accounts: Sequence[Account],
    parsed: ParsedInstruction,
    execute_now: bool,
) -> List[AccountDelta]:
    """
    Solo las dos cuentas de la instrucción, en el orden del ledger
    (primera aparición en el snapshot), no en el orden de la instrucción.
    """
    involved = (parsed.debit_account, parsed.credit_account)
    seen = set()
    out: List[AccountDelta] = []

    for acc in accounts:
        if acc.id not in involved or acc.id in seen:
            continue
        seen.add(acc.id)

        balance = acc.balance
        if execute_now:
            if acc.id == parsed.debit_account:
                balance = acc.balance - parsed.amount
            else:
                balance = acc.balance + parsed.amount

        out.append(
            AccountDelta(
                id=acc.id,
                balance=balance,
                balance_before=acc.balance,
                currency=acc.currency,
            )
        )

    return out


def resolve_execution(
    parsed: ParsedInstruction,
    debit: Account,
    accounts: Sequence[Account],
    settings: ProcessorSettings,
) -> ExecutionResult:
    execute_now = should_execute_now(parsed.execute_by, settings.current_date)

    # Fondos solo se verifican si se ejecuta ahora; una pendiente se acepta igual
    if execute_now and debit.balance < parsed.amount:
        raise InstructionError(StatusCode.INSUFFICIENT_FUNDS, PaymentMessages.INSUFFICIENT_FUNDS)

    deltas = project_accounts(accounts, parsed, execute_now)
    if execute_now:
        return ExecutionResult.executed(parsed, deltas)
    return ExecutionResult.pending(parsed, deltas)
