"""Settings da integração Bem Promotora.

Credenciais vêm apenas do ambiente (ou Secret Manager via env).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from functools import lru_cache

BEMPROMOTORA_API_BASE_URL: str = "https://api.techbem.com.br/integracao-corban"


@dataclass(frozen=True)
class BemPromotoraSettings:
    """Configurações da API Bem Promotora.

    Attributes:
        api_base_url: URL base da API
        username: Usuário de integração
        password: Senha de integração
        request_timeout_seconds: Timeout para requisições HTTP
        token_ttl_seconds: Validade assumida do token JWT
        default_prazo: Prazo padrão da simulação (meses, 3 dígitos)
    """

    api_base_url: str = BEMPROMOTORA_API_BASE_URL
    username: str = ""
    password: str = ""

    request_timeout_seconds: float = 30.0
    token_ttl_seconds: int = 3600

    default_prazo: str = "096"

    @property
    def token_validity(self) -> timedelta:
        return timedelta(seconds=self.token_ttl_seconds)

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("BEMPROMOTORA_API_BASE_URL não configurado")

        if not self.username:
            errors.append("BEMPROMOTORA_USERNAME não configurado")

        if not self.password:
            errors.append("BEMPROMOTORA_PASSWORD não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("BEMPROMOTORA_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.token_ttl_seconds <= 0:
            errors.append("BEMPROMOTORA_TOKEN_TTL_SECONDS deve ser > 0")

        if not self.default_prazo.isdigit():
            errors.append("BEMPROMOTORA_DEFAULT_PRAZO deve conter apenas dígitos")

        return errors


def _load_from_env() -> BemPromotoraSettings:
    """Carrega BemPromotoraSettings a partir de variáveis de ambiente."""
    return BemPromotoraSettings(
        api_base_url=os.getenv("BEMPROMOTORA_API_BASE_URL", BEMPROMOTORA_API_BASE_URL),
        username=os.getenv("BEMPROMOTORA_USERNAME", ""),
        password=os.getenv("BEMPROMOTORA_PASSWORD", ""),
        request_timeout_seconds=float(
            os.getenv("BEMPROMOTORA_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        token_ttl_seconds=int(os.getenv("BEMPROMOTORA_TOKEN_TTL_SECONDS", "3600")),
        default_prazo=os.getenv("BEMPROMOTORA_DEFAULT_PRAZO", "096"),
    )


@lru_cache(maxsize=1)
def get_bempromotora_settings() -> BemPromotoraSettings:
    """Retorna instância cacheada de BemPromotoraSettings."""
    return _load_from_env()
