"""Limpeza, formatação e validação de CPF.

Funções puras, sem IO. CPF inválido é resultado booleano, nunca exceção.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

CPF_LENGTH = 11

_NON_DIGITS = re.compile(r"[^0-9]")
_CPF_GROUPS = re.compile(r"([0-9]{3})([0-9]{3})([0-9]{3})([0-9]{2})")


@dataclass(frozen=True)
class CPFCheck:
    """Resultado de format_and_validate_cpf."""

    formatted: str
    is_valid: bool


def only_digits(value: str) -> str:
    return _NON_DIGITS.sub("", value)


def clean_cpf(cpf: str) -> str:
    """Remove todos os caracteres não numéricos."""
    return only_digits(cpf)


def format_cpf(cpf: str) -> str:
    """Formata no padrão XXX.XXX.XXX-XX.

    Completa com zeros à esquerda até 11 dígitos. Nunca falha: com mais
    de 11 dígitos, apenas os 11 primeiros são agrupados.
    """
    padded = clean_cpf(cpf).zfill(CPF_LENGTH)
    return _CPF_GROUPS.sub(r"\1.\2.\3-\4", padded, count=1)


def _check_digit(digits: str, weight_start: int) -> int:
    total = sum(int(d) * (weight_start - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder >= 10 else remainder


def is_valid_cpf(cpf: str) -> bool:
    """Valida CPF pelos dois dígitos verificadores.

    Rejeita tamanhos diferentes de 11 e sequências de dígitos repetidos
    (ex: 000.000.000-00).
    """
    cleaned = clean_cpf(cpf)
    if len(cleaned) != CPF_LENGTH:
        return False
    if cleaned == cleaned[0] * CPF_LENGTH:
        return False

    if _check_digit(cleaned[:9], 10) != int(cleaned[9]):
        return False
    return _check_digit(cleaned[:10], 11) == int(cleaned[10])


def format_and_validate_cpf(cpf: str) -> CPFCheck:
    """Formata e valida de forma independente."""
    cleaned = clean_cpf(cpf)
    return CPFCheck(formatted=format_cpf(cleaned), is_valid=is_valid_cpf(cleaned))


def mask_cpf(cpf: str) -> str:
    """Mascara CPF para logs (mantém só os 4 últimos dígitos)."""
    cleaned = clean_cpf(cpf)
    if not cleaned:
        return ""
    return "*" * max(len(cleaned) - 4, 0) + cleaned[-4:]
