"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta o
cliente concreto do parceiro aos casos de uso.

Uso:
    from app.bootstrap import initialize_app, get_listar_contratos

    initialize_app()
    contratos = await get_listar_contratos().execute(cpf)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_bempromotora_settings

if TYPE_CHECKING:
    from api.connectors.bempromotora import BemPromotoraClient
    from app.use_cases.refinanciamento import (
        ListarContratosRefinanciaveis,
        SimularRefinanciamento,
    )

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação. Chamar uma vez no início do serviço."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"bempromotora: {error}" for error in get_bempromotora_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_bempromotora_client() -> BemPromotoraClient:
    """Cliente do parceiro (singleton, token compartilhado no processo)."""
    from api.connectors.bempromotora import create_bempromotora_client

    return create_bempromotora_client()


def get_listar_contratos() -> ListarContratosRefinanciaveis:
    from app.use_cases.refinanciamento import ListarContratosRefinanciaveis

    return ListarContratosRefinanciaveis(get_bempromotora_client())


def get_simular_refinanciamento() -> SimularRefinanciamento:
    from app.use_cases.refinanciamento import SimularRefinanciamento

    return SimularRefinanciamento(get_bempromotora_client())
