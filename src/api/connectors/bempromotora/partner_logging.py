"""Helpers de logging para a API Bem Promotora (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import PartnerApiError

logger = logging.getLogger(__name__)

_MAX_BODY_CHARS = 1000


def truncate_body(body: str | None) -> str | None:
    if body is None or len(body) <= _MAX_BODY_CHARS:
        return body
    return body[:_MAX_BODY_CHARS] + "..."


def log_partner_error(error: PartnerApiError, method: str, endpoint: str) -> None:
    """Loga falha do parceiro sem expor token ou credenciais."""
    logger.warning(
        "bempromotora_request_failed",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": error.status_code,
            "kind": str(error.kind),
            "error": error.message,
            "response_text": truncate_body(error.raw_body),
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "bempromotora_request_ok",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
