from __future__ import annotations

from .messages import PaymentMessages, StatusCode


class InstructionError(ValueError):
    """Falla terminal de cualquier etapa; el borde la convierte en un resultado `failed`."""

    def __init__(self, code: StatusCode, reason: str):
        super().__init__(reason)
        self.code = code
        self.reason = reason

    @classmethod
    def malformed(cls) -> "InstructionError":
        return cls(StatusCode.MALFORMED_INSTRUCTION, PaymentMessages.MALFORMED_INSTRUCTION)


class AccountShapeError(InstructionError):
    """El snapshot de cuentas no tiene la forma esperada (id, balance, currency)."""

    def __init__(self, reason: str):
        super().__init__(StatusCode.ACCOUNT_NOT_FOUND, reason)
