"""Formatter JSON com campos obrigatórios padronizados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,000",
            "level": "WARNING",
            "logger": "api.connectors.bempromotora.partner_logging",
            "message": "bempromotora_request_failed",
            "correlation_id": "abc-123",
            "service": "consulta_beneficios",
            "status_code": 422
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
