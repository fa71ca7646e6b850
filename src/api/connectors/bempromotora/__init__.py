"""Conector Bem Promotora - adapter de borda para a API de refinanciamento.

Este módulo é o único ponto de IO com o parceiro.
Responsabilidades:
- Autenticação e cache do token bearer
- Consulta de contratos por CPF
- Simulação de refinanciamento
- Erro único (PartnerApiError) com discriminante de origem
"""

from .auth import TOKEN_VALIDITY, AuthToken, TokenCache
from .errors import (
    SIMULATION_GENERIC_MESSAGE,
    SIMULATION_STATUS_MESSAGES,
    PartnerApiError,
    PartnerErrorKind,
    simulation_error_message,
)
from .http_client import BemPromotoraClient, create_bempromotora_client
from .models import (
    AmortizationRow,
    ContractRecord,
    ContractToRefinance,
    SimulationRequest,
    SimulationResponse,
    SimulationResult,
)
from .payload import DEFAULT_PRAZO, build_simulation_payload

__all__ = [
    "DEFAULT_PRAZO",
    "SIMULATION_GENERIC_MESSAGE",
    "SIMULATION_STATUS_MESSAGES",
    "TOKEN_VALIDITY",
    "AmortizationRow",
    "AuthToken",
    "BemPromotoraClient",
    "ContractRecord",
    "ContractToRefinance",
    "PartnerApiError",
    "PartnerErrorKind",
    "SimulationRequest",
    "SimulationResponse",
    "SimulationResult",
    "TokenCache",
    "build_simulation_payload",
    "create_bempromotora_client",
    "simulation_error_message",
]
