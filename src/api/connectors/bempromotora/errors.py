"""Erro único da integração Bem Promotora e mapeamento de status HTTP."""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any

TRANSPORT_FAILURE_STATUS = 500

SIMULATION_STATUS_MESSAGES: dict[int, str] = {
    400: "Dados inválidos para simulação",
    401: "Não autorizado - verifique as credenciais",
    404: "Contrato não encontrado",
    422: "Valor líquido inferior ao mínimo permitido",
    500: "Erro interno do servidor parceiro",
}
SIMULATION_GENERIC_MESSAGE = "Erro na simulação"
MISSING_TOKEN_MESSAGE = "Token não encontrado na resposta de autenticação"


class PartnerErrorKind(StrEnum):
    """Origem da falha."""

    TRANSPORT_FAILURE = "transport_failure"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"


class PartnerApiError(Exception):
    """Falha da API parceira, já normalizada.

    Attributes:
        message: Mensagem legível (pt-BR)
        status_code: Status HTTP de origem (500 para falhas de transporte)
        raw_body: Corpo bruto da resposta, quando houver
        kind: Discriminante da origem da falha
        partner_messages: Mensagens de erro extraídas do corpo do parceiro
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        raw_body: str | None = None,
        *,
        kind: PartnerErrorKind = PartnerErrorKind.HTTP_STATUS,
        partner_messages: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.raw_body = raw_body
        self.kind = kind
        self.partner_messages = partner_messages

    @classmethod
    def transport_failure(cls, operation: str, exc: Exception) -> PartnerApiError:
        return cls(
            f"Erro de conexão na {operation}: {exc}",
            TRANSPORT_FAILURE_STATUS,
            kind=PartnerErrorKind.TRANSPORT_FAILURE,
        )

    @classmethod
    def malformed_response(cls, message: str, raw_body: str | None) -> PartnerApiError:
        return cls(
            message,
            TRANSPORT_FAILURE_STATUS,
            raw_body,
            kind=PartnerErrorKind.MALFORMED_RESPONSE,
        )

    @property
    def is_transport_failure(self) -> bool:
        return self.kind is PartnerErrorKind.TRANSPORT_FAILURE

    @property
    def is_http_status(self) -> bool:
        return self.kind is PartnerErrorKind.HTTP_STATUS

    @property
    def is_malformed_response(self) -> bool:
        return self.kind is PartnerErrorKind.MALFORMED_RESPONSE

    def to_dict(self) -> dict[str, Any]:
        """Representação para a camada web."""
        return {
            "error": self.message,
            "status": self.status_code,
            "kind": str(self.kind),
            "details": self.raw_body or "Erro na comunicação com o servidor parceiro",
            "partner_messages": list(self.partner_messages),
        }

    def __repr__(self) -> str:
        return (
            f"PartnerApiError(kind={self.kind!s}, status_code={self.status_code}, "
            f"message={self.message!r})"
        )


def simulation_error_message(status_code: int) -> str:
    """Mensagem de domínio para status não-2xx da simulação."""
    return SIMULATION_STATUS_MESSAGES.get(status_code, SIMULATION_GENERIC_MESSAGE)


def extract_partner_messages(raw_body: str) -> tuple[str, ...]:
    """Extrai mensagens de `erros[].mensagem` ou `erro` do corpo do parceiro.

    Corpo não-JSON ou sem esses campos resulta em tupla vazia.
    """
    try:
        data = json.loads(raw_body)
    except (json.JSONDecodeError, TypeError):
        return ()
    if not isinstance(data, dict):
        return ()

    erros = data.get("erros")
    if isinstance(erros, list) and erros:
        return tuple(
            str(item["mensagem"])
            for item in erros
            if isinstance(item, dict) and item.get("mensagem")
        )

    erro = data.get("erro")
    if erro:
        return (str(erro),)
    return ()
