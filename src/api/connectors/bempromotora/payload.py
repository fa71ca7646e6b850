"""Montagem do payload de /v2/refinanciamentos."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utils.cpf import clean_cpf, only_digits

if TYPE_CHECKING:
    from .models import SimulationRequest

DEFAULT_PRAZO = "096"
_DATE_LENGTH = len("YYYY-MM-DD")


def build_simulation_payload(
    request: SimulationRequest,
    default_prazo: str = DEFAULT_PRAZO,
) -> dict[str, Any]:
    """Converte SimulationRequest no corpo JSON esperado pelo parceiro.

    Remove formatação de CPF e números de contrato e corta `dataContrato`
    em YYYY-MM-DD (o parceiro rejeita timestamp completo).
    """
    payload: dict[str, Any] = {
        "cpf": clean_cpf(request.cpf),
        "dataNascimento": request.data_nascimento,
        "conveniada": request.conveniada,
        "contratosRefinanciamento": [
            {
                "contrato": only_digits(contract.contrato),
                "dataContrato": contract.data_contrato[:_DATE_LENGTH],
            }
            for contract in request.contratos
        ],
        "prestacao": request.prestacao,
        "prazo": request.prazo or default_prazo,
        "retornarSomenteOperacoesViaveis": request.retornar_somente_operacoes_viaveis,
    }

    # Campos opcionais só vão quando informados
    if request.tipo_simulacao is not None:
        payload["tipoSimulacao"] = request.tipo_simulacao
    if request.plano is not None:
        payload["plano"] = request.plano
    if request.valor_desejado is not None:
        payload["valorDesejado"] = request.valor_desejado
    return payload
