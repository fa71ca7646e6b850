"""Agregador de settings do consulta_beneficios.

Re-exporta todas as settings e funções de cada módulo.
Organização por integração para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Partner settings
from config.settings.bempromotora import (
    BEMPROMOTORA_API_BASE_URL,
    BemPromotoraSettings,
    get_bempromotora_settings,
)

__all__ = [
    # Constants
    "BEMPROMOTORA_API_BASE_URL",
    # Base
    "BaseSettings",
    # Partners
    "BemPromotoraSettings",
    "Environment",
    "get_base_settings",
    "get_bempromotora_settings",
]
