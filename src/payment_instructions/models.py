from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .messages import PaymentMessages, StatusCode


InstructionType = Literal["DEBIT", "CREDIT"]
Status = Literal["successful", "pending", "failed"]


class Account(BaseModel):
    id: str
    balance: Union[int, float] = Field(..., description="Nunca negativo (lo garantiza normalize_accounts)")
    currency: str = Field(..., description="Siempre en mayúsculas tras normalizar")


class ParsedInstruction(BaseModel):
    type: InstructionType
    amount: int = Field(..., gt=0)
    currency: str
    debit_account: str
    credit_account: str
    execute_by: Optional[str] = Field(None, description="YYYY-MM-DD (solo forma, sin validar calendario)")


class AccountDelta(BaseModel):
    id: str
    balance: Union[int, float] = Field(..., description="Balance post-transacción (igual a balance_before si está pendiente)")
    balance_before: Union[int, float]
    currency: str


class ExecutionResult(BaseModel):
    """
    Sobre de respuesta plano. La forma es la misma para los tres estados,
    así el llamador puede decidir solo con `status`.
    """

    type: Optional[InstructionType] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: Status
    status_reason: str
    status_code: str
    accounts: List[AccountDelta] = Field(default_factory=list)

    @classmethod
    def executed(cls, parsed: ParsedInstruction, accounts: List[AccountDelta]) -> "ExecutionResult":
        return cls(
            type=parsed.type,
            amount=parsed.amount,
            currency=parsed.currency,
            debit_account=parsed.debit_account,
            credit_account=parsed.credit_account,
            execute_by=None,
            status="successful",
            status_reason=PaymentMessages.SUCCESS_EXECUTED,
            status_code=StatusCode.EXECUTED.value,
            accounts=accounts,
        )

    @classmethod
    def pending(cls, parsed: ParsedInstruction, accounts: List[AccountDelta]) -> "ExecutionResult":
        return cls(
            type=parsed.type,
            amount=parsed.amount,
            currency=parsed.currency,
            debit_account=parsed.debit_account,
            credit_account=parsed.credit_account,
            execute_by=parsed.execute_by,
            status="pending",
            status_reason=PaymentMessages.SUCCESS_PENDING,
            status_code=StatusCode.PENDING.value,
            accounts=accounts,
        )

    @classmethod
    def failed(cls, reason: str, code: str) -> "ExecutionResult":
        return cls(status="failed", status_reason=reason, status_code=code)
