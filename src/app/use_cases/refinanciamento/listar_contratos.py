"""Use case: listar contratos refinanciáveis de um CPF."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.cpf import clean_cpf, is_valid_cpf, mask_cpf
from utils.errors import InvalidCPFError

if TYPE_CHECKING:
    from api.connectors.bempromotora.models import ContractRecord
    from app.protocols.partner_client import RefinancingPartnerClientProtocol

logger = logging.getLogger(__name__)


def ensure_valid_cpf(cpf: str | None) -> str:
    """Retorna o CPF limpo ou levanta InvalidCPFError."""
    if not cpf or not cpf.strip():
        raise InvalidCPFError("CPF é obrigatório", details="O CPF do cliente deve ser fornecido")
    if not is_valid_cpf(cpf):
        raise InvalidCPFError("CPF inválido", details="Dígitos verificadores não conferem")
    return clean_cpf(cpf)


class ListarContratosRefinanciaveis:
    """Busca contratos no parceiro e mantém só os refinanciáveis."""

    def __init__(self, client: RefinancingPartnerClientProtocol) -> None:
        self._client = client

    async def execute(self, cpf: str) -> list[ContractRecord]:
        cleaned = ensure_valid_cpf(cpf)
        contracts = await self._client.get_contracts(cleaned)
        refinanciaveis = [contract for contract in contracts if contract.refinanciavel]
        logger.info(
            "contratos_refinanciaveis_listados",
            extra={
                "cpf": mask_cpf(cleaned),
                "total": len(contracts),
                "refinanciaveis": len(refinanciaveis),
            },
        )
        return refinanciaveis
