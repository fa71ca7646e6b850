"""Casos de uso de refinanciamento (contratos e simulação)."""

from app.use_cases.refinanciamento.listar_contratos import (
    ListarContratosRefinanciaveis,
    ensure_valid_cpf,
)
from app.use_cases.refinanciamento.simular_refinanciamento import (
    SimulacaoInput,
    SimularRefinanciamento,
    find_matching_contract,
    partner_contract_key,
    requested_contract_key,
)

__all__ = [
    "ListarContratosRefinanciaveis",
    "SimulacaoInput",
    "SimularRefinanciamento",
    "ensure_valid_cpf",
    "find_matching_contract",
    "partner_contract_key",
    "requested_contract_key",
]
