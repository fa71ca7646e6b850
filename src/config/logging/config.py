"""Setup do logging JSON do consulta_beneficios.

Um único handler em stdout, formatado por python-json-logger. Cada record
recebe `service` e `correlation_id` pelo CorrelationIdFilter, então os
módulos só fazem `logging.getLogger(__name__)` e passam dados em `extra`.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="consulta_beneficios")

    logger = get_logger(__name__)
    logger.info("bempromotora_auth_success", extra={"expires_at": "..."})

CPF só vai para log mascarado (utils.cpf.mask_cpf). Token e senha, nunca.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "consulta_beneficios"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON no logger raiz.

    Chamado pelo bootstrap. Chamar de novo troca o handler anterior em vez
    de empilhar outro.

    Args:
        level: Nome do nível, sem diferenciar maiúsculas.
        service_name: Valor do campo `service` em todos os records.
        correlation_id_getter: Lê o correlation_id corrente (o bootstrap
            passa app.observability.get_correlation_id).

    Raises:
        ValueError: Nível fora de VALID_LOG_LEVELS.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
) -> None:
    """Registra que um caminho alternativo foi seguido.

    Hoje o caso é a simulação que segue com a conveniada informada pelo
    chamador quando a busca de contratos falha ou não acha o contrato.

    Args:
        logger: Logger do módulo que aplicou o fallback.
        component: Ex: "simular_refinanciamento".
        reason: Código curto, sem PII (ex: "contract_lookup_failed").
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason

    logger.info("Fallback applied for %s", component, extra=extra)
