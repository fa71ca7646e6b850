"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BusinessRuleError,
    InvalidCPFError,
    MissingFieldsError,
    NoViableSimulationError,
)

__all__ = [
    "BusinessRuleError",
    "InvalidCPFError",
    "MissingFieldsError",
    "NoViableSimulationError",
]
