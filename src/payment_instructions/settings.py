"""
Configuración del procesador.

Los valores fijos (fecha "actual", monedas soportadas, charset de ids) viven
aquí y se pasan explícitamente a cada etapa. Se pueden sobreescribir con
variables de entorno `PAYMENT_INSTRUCTIONS_*`.
"""
from __future__ import annotations

import string
from functools import lru_cache
from typing import Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CURRENT_DATE = "2025-11-14"
DEFAULT_CURRENCIES: Tuple[str, ...] = ("USD", "NGN", "GBP", "GHS")
DEFAULT_ACCOUNT_ID_CHARS = string.ascii_letters + string.digits + "-._@"


def has_date_shape(value: str) -> bool:
    # Solo la forma YYYY-MM-DD; no se valida el calendario
    return len(value) == 10 and value[4] == "-" and value[7] == "-"


class ProcessorSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAYMENT_INSTRUCTIONS_", frozen=True)

    current_date: str = DEFAULT_CURRENT_DATE
    supported_currencies: Tuple[str, ...] = DEFAULT_CURRENCIES
    account_id_chars: str = DEFAULT_ACCOUNT_ID_CHARS

    @field_validator("current_date")
    @classmethod
    def _check_current_date(cls, v: str) -> str:
        if not has_date_shape(v):
            raise ValueError(f"current_date debe tener forma YYYY-MM-DD: {v!r}")
        return v

    @field_validator("supported_currencies")
    @classmethod
    def _upper_currencies(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(c.upper() for c in v)


@lru_cache(maxsize=1)
def get_settings() -> ProcessorSettings:
    return ProcessorSettings()
