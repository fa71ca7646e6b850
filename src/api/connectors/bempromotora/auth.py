"""Token bearer da Bem Promotora e cache por instância de cliente."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# A API não informa expiração; validade fixa a partir da emissão.
TOKEN_VALIDITY = timedelta(hours=1)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class AuthToken:
    """Token JWT e instante de expiração."""

    value: str
    expires_at: datetime

    def is_valid_at(self, now: datetime) -> bool:
        return now < self.expires_at


class TokenCache:
    """Guarda no máximo um token; sobrescrito a cada renovação.

    Token expirado é descartado, nunca revogado.
    """

    __slots__ = ("_clock", "_token", "_validity")

    def __init__(
        self,
        validity: timedelta = TOKEN_VALIDITY,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._validity = validity
        self._clock = clock or utc_now
        self._token: AuthToken | None = None

    @property
    def token(self) -> AuthToken | None:
        return self._token

    def get(self) -> AuthToken | None:
        """Retorna o token em cache se ainda válido."""
        if self._token is not None and self._token.is_valid_at(self._clock()):
            return self._token
        return None

    def store(self, value: str) -> AuthToken:
        """Armazena novo token com validade a partir de agora."""
        self._token = AuthToken(value=value, expires_at=self._clock() + self._validity)
        return self._token

    def clear(self) -> None:
        self._token = None
