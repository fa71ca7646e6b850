"""Protocolos e contratos do core da aplicação."""

from .partner_client import RefinancingPartnerClientProtocol

__all__ = [
    "RefinancingPartnerClientProtocol",
]
