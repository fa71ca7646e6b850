"""Protocolo do cliente do parceiro de refinanciamento.

Evita dependência direta dos casos de uso na camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from api.connectors.bempromotora.models import (
        ContractRecord,
        SimulationRequest,
        SimulationResponse,
    )


class RefinancingPartnerClientProtocol(Protocol):
    """Contrato mínimo para consulta de contratos e simulação."""

    async def get_contracts(self, cpf: str) -> list[ContractRecord]: ...

    async def simulate_refinancing(
        self,
        request: SimulationRequest,
    ) -> SimulationResponse: ...
