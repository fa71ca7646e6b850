"""Exceções de regra de negócio dos casos de uso."""

from __future__ import annotations


class BusinessRuleError(ValueError):
    """Base para entradas rejeitadas antes ou depois da chamada ao parceiro."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidCPFError(BusinessRuleError):
    """CPF ausente ou com dígitos verificadores inválidos."""


class MissingFieldsError(BusinessRuleError):
    """Campos obrigatórios não informados."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            "Todos os campos obrigatórios devem ser preenchidos",
            details=", ".join(fields),
        )
        self.fields = tuple(fields)


class NoViableSimulationError(BusinessRuleError):
    """Parceiro não retornou nenhuma simulação viável."""
