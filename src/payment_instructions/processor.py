from __future__ import annotations

import logging
from typing import Any, Optional

from .accounts import index_accounts, normalize_accounts
from .errors import InstructionError
from .grammar import parse_tokens
from .messages import PaymentMessages, StatusCode
from .models import ExecutionResult
from .resolve import resolve_execution
from .settings import ProcessorSettings, get_settings
from .tokens import tokenize
from .validate import validate_instruction


logger = logging.getLogger(__name__)

HTTP_200_OK = 200
HTTP_400_BAD_REQUEST = 400


def _run(body: Any, settings: ProcessorSettings) -> ExecutionResult:
    if not isinstance(body, dict):
        raise InstructionError.malformed()

    instruction = body.get("instruction")
    if not isinstance(instruction, str) or not instruction:
        raise InstructionError.malformed()

    # Las cuentas se validan antes de parsear la instrucción
    accounts = normalize_accounts(body.get("accounts"))

    stream = tokenize(instruction.strip())
    parsed = parse_tokens(stream, settings)

    debit, _credit = validate_instruction(parsed, index_accounts(accounts), settings)
    return resolve_execution(parsed, debit, accounts, settings)


def process_instruction(body: Any, settings: Optional[ProcessorSettings] = None) -> ExecutionResult:
    """
    Punto de entrada: body = {"instruction": str, "accounts": [...]}.
    Nunca lanza; toda falla termina en el mismo sobre `failed`.
    """
    settings = settings or get_settings()

    try:
        result = _run(body, settings)
    except InstructionError as err:
        result = ExecutionResult.failed(err.reason, err.code.value)
    except Exception:
        # Último recurso: entradas con forma inesperada no deben romper al llamador
        logger.warning("instruction_fallback", exc_info=True)
        result = ExecutionResult.failed(
            PaymentMessages.MALFORMED_INSTRUCTION, StatusCode.MALFORMED_INSTRUCTION.value
        )

    logger.debug("instruction_processed status=%s status_code=%s", result.status, result.status_code)
    return result


def http_status_for(result: ExecutionResult) -> int:
    return HTTP_400_BAD_REQUEST if result.status == "failed" else HTTP_200_OK
