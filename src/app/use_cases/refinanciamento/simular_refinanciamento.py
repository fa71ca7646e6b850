"""Use case: simular refinanciamento de um contrato.

Antes de simular, tenta usar a conveniada que o próprio parceiro
associa ao contrato. Se a busca falhar ou não achar o contrato,
segue com a conveniada informada.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

from api.connectors.bempromotora.errors import PartnerApiError
from api.connectors.bempromotora.models import ContractToRefinance, SimulationRequest
from app.use_cases.refinanciamento.listar_contratos import ensure_valid_cpf
from config.logging import log_fallback
from utils.cpf import mask_cpf, only_digits
from utils.errors import MissingFieldsError, NoViableSimulationError

if TYPE_CHECKING:
    from api.connectors.bempromotora.models import ContractRecord, SimulationResult
    from app.protocols.partner_client import RefinancingPartnerClientProtocol

logger = logging.getLogger(__name__)

CONTRACT_NUMBER_WIDTH = 10
_LEADING_INTEGER = re.compile(r"\s*([0-9]+)")
NO_VIABLE_SIMULATION_DETAILS = (
    "Não foi possível encontrar opções de refinanciamento para os dados fornecidos"
)


@dataclass(frozen=True)
class SimulacaoInput:
    """Dados do formulário de simulação."""

    cpf: str
    data_nascimento: str
    conveniada: str
    contrato: str
    data_contrato: str
    prestacao: float | str

    def missing_fields(self) -> list[str]:
        missing = []
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None or (isinstance(value, str) and not value.strip()) or value == 0:
                missing.append(item.name)
        return missing


def partner_contract_key(value: str) -> str:
    """Número do parceiro lido como inteiro (prefixo numérico), 10 posições.

    Sem prefixo numérico retorna "" e nunca casa com outro contrato.
    """
    match = _LEADING_INTEGER.match(value)
    if match is None:
        return ""
    return str(int(match.group(1))).zfill(CONTRACT_NUMBER_WIDTH)


def requested_contract_key(value: str) -> str:
    """Número informado pelo chamador: só dígitos, completado a 10 posições."""
    return only_digits(value).zfill(CONTRACT_NUMBER_WIDTH)


def find_matching_contract(
    contracts: list[ContractRecord],
    contrato: str,
) -> ContractRecord | None:
    target = requested_contract_key(contrato)
    for contract in contracts:
        if contract.contrato == contrato:
            return contract
        if partner_contract_key(contract.contrato) == target:
            return contract
    return None


class SimularRefinanciamento:
    """Orquestra busca de conveniada e simulação viável."""

    def __init__(self, client: RefinancingPartnerClientProtocol) -> None:
        self._client = client

    async def execute(self, data: SimulacaoInput) -> list[SimulationResult]:
        """Executa simulação.

        Raises:
            MissingFieldsError: Campo obrigatório ausente
            InvalidCPFError: CPF inválido
            NoViableSimulationError: Parceiro não retornou simulações
            PartnerApiError: Falha da simulação no parceiro
        """
        missing = data.missing_fields()
        if missing:
            raise MissingFieldsError(missing)

        cpf = ensure_valid_cpf(data.cpf)
        try:
            prestacao = float(data.prestacao)
        except (TypeError, ValueError) as exc:
            raise MissingFieldsError(["prestacao"]) from exc
        conveniada = await self._resolve_conveniada(cpf, data)

        request = SimulationRequest(
            cpf=cpf,
            data_nascimento=data.data_nascimento,
            conveniada=conveniada,
            contratos=(ContractToRefinance(data.contrato, data.data_contrato),),
            prestacao=prestacao,
            retornar_somente_operacoes_viaveis=True,
        )
        response = await self._client.simulate_refinancing(request)

        if not response.has_results:
            raise NoViableSimulationError(
                "Nenhuma simulação viável encontrada",
                details=response.error or NO_VIABLE_SIMULATION_DETAILS,
            )

        logger.info(
            "simulacao_concluida",
            extra={"cpf": mask_cpf(cpf), "ofertas": len(response.results or ())},
        )
        return list(response.results or ())

    async def _resolve_conveniada(self, cpf: str, data: SimulacaoInput) -> str:
        try:
            contracts = await self._client.get_contracts(cpf)
        except PartnerApiError as exc:
            logger.warning(
                "busca_conveniada_falhou",
                extra={"status_code": exc.status_code, "kind": str(exc.kind)},
            )
            log_fallback(logger, "simular_refinanciamento", reason="contract_lookup_failed")
            return data.conveniada

        match = find_matching_contract(contracts, data.contrato)
        if match is None or not match.conveniada:
            log_fallback(logger, "simular_refinanciamento", reason="contract_not_found")
            return data.conveniada
        return match.conveniada
