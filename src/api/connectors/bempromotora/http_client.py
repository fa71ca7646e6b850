"""Cliente HTTP da API Bem Promotora (contratos e refinanciamento).

Único ponto de IO com o parceiro:
- Autenticação com token bearer em cache por instância
- Consulta de contratos por CPF
- Simulação de refinanciamento
- Normalização de toda falha em PartnerApiError

Sem retry automático: política de retry pertence ao chamador.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, NoReturn

import httpx

from utils.cpf import mask_cpf

from .auth import TOKEN_VALIDITY, AuthToken, TokenCache
from .errors import (
    MISSING_TOKEN_MESSAGE,
    PartnerApiError,
    extract_partner_messages,
    simulation_error_message,
)
from .models import ContractRecord, SimulationRequest, SimulationResponse
from .partner_logging import log_partner_error, log_success
from .payload import DEFAULT_PRAZO, build_simulation_payload

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime, timedelta

    from config.settings import BemPromotoraSettings

logger = logging.getLogger(__name__)

AUTH_PATH = "/Autenticacao/Autenticar"
CONTRACTS_PATH = "/contratos"
SIMULATION_PATH = "/v2/refinanciamentos"


class BemPromotoraClient:
    """Cliente autenticado da API Bem Promotora.

    O token é obtido sob demanda antes de cada operação e reaproveitado
    enquanto válido. A obtenção é serializada por lock, então chamadas
    concorrentes sem token fazem uma única autenticação.
    """

    __slots__ = (
        "_auth_lock",
        "_base_url",
        "_default_prazo",
        "_http_client",
        "_owns_http_client",
        "_password",
        "_timeout_seconds",
        "_tokens",
        "_username",
    )

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 30.0,
        token_validity: timedelta = TOKEN_VALIDITY,
        clock: Callable[[], datetime] | None = None,
        default_prazo: str = DEFAULT_PRAZO,
    ) -> None:
        """Inicializa cliente.

        Args:
            base_url: URL base da API (sem barra final)
            username: Usuário de integração
            password: Senha de integração
            http_client: Cliente httpx injetado (testes usam MockTransport)
            timeout_seconds: Timeout do cliente httpx criado internamente
            token_validity: Validade assumida do token após emissão
            clock: Fonte de tempo (UTC) para expiração do token
            default_prazo: Prazo enviado quando a requisição não informa
        """
        self._base_url = base_url.rstrip("/")
        self._username = username
        self._password = password
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._timeout_seconds = timeout_seconds
        self._tokens = TokenCache(validity=token_validity, clock=clock)
        self._auth_lock = asyncio.Lock()
        self._default_prazo = default_prazo

    async def __aenter__(self) -> BemPromotoraClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Fecha o cliente httpx se foi criado aqui."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    @property
    def cached_token(self) -> AuthToken | None:
        return self._tokens.token

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout_seconds)
        return self._http_client

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    @staticmethod
    def _auth_headers(token: AuthToken) -> dict[str, str]:
        return {"Authorization": f"Bearer {token.value}"}

    async def _send(
        self,
        operation: str,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Executa a requisição convertendo falha de rede em PartnerApiError."""
        client = self._get_http_client()
        try:
            return await client.request(method, self._url(path), **kwargs)
        except httpx.HTTPError as exc:
            error = PartnerApiError.transport_failure(operation, exc)
            log_partner_error(error, method, path)
            raise error from exc

    @staticmethod
    def _parse_json(
        response: httpx.Response,
        operation: str,
        method: str,
        path: str,
    ) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            error = PartnerApiError.malformed_response(
                f"Resposta inválida do parceiro na {operation}",
                response.text,
            )
            log_partner_error(error, method, path)
            raise error from exc

    @staticmethod
    def _raise_logged(error: PartnerApiError, method: str, path: str) -> NoReturn:
        log_partner_error(error, method, path)
        raise error

    async def _authenticate(self) -> AuthToken:
        """Retorna token válido, autenticando apenas se necessário."""
        cached = self._tokens.get()
        if cached is not None:
            return cached

        async with self._auth_lock:
            # Outra corrotina pode ter renovado enquanto aguardávamos
            cached = self._tokens.get()
            if cached is not None:
                return cached
            return await self._request_token()

    async def _request_token(self) -> AuthToken:
        operation = "autenticação"
        response = await self._send(
            operation,
            "POST",
            AUTH_PATH,
            json={"usuario": self._username, "senha": self._password},
        )

        if not response.is_success:
            self._raise_logged(
                PartnerApiError(
                    f"Falha na autenticação: {response.status_code} {response.reason_phrase}",
                    response.status_code,
                    response.text,
                    partner_messages=extract_partner_messages(response.text),
                ),
                "POST",
                AUTH_PATH,
            )

        data = self._parse_json(response, operation, "POST", AUTH_PATH)
        retorno = data.get("retorno") if isinstance(data, dict) else None
        jwt_token = retorno.get("jwtToken") if isinstance(retorno, dict) else None
        if not jwt_token:
            self._raise_logged(
                PartnerApiError.malformed_response(MISSING_TOKEN_MESSAGE, response.text),
                "POST",
                AUTH_PATH,
            )

        token = self._tokens.store(str(jwt_token))
        logger.info(
            "bempromotora_auth_success",
            extra={"expires_at": token.expires_at.isoformat()},
        )
        return token

    async def get_contracts(self, cpf: str) -> list[ContractRecord]:
        """Lista contratos do CPF.

        O CPF é enviado como recebido; validar antes com utils.cpf.

        Returns:
            Contratos do parceiro (lista vazia sem `retorno`)

        Raises:
            PartnerApiError: Status não-2xx, resposta inválida ou falha de rede
        """
        operation = "busca de contratos"
        token = await self._authenticate()
        logger.info("bempromotora_contracts_lookup", extra={"cpf": mask_cpf(cpf)})

        response = await self._send(
            operation,
            "GET",
            CONTRACTS_PATH,
            params={"CpfCliente": cpf},
            headers=self._auth_headers(token),
        )
        if not response.is_success:
            self._raise_logged(
                PartnerApiError(
                    f"Erro ao buscar contratos: {response.status_code} {response.reason_phrase}",
                    response.status_code,
                    response.text,
                    partner_messages=extract_partner_messages(response.text),
                ),
                "GET",
                CONTRACTS_PATH,
            )

        data = self._parse_json(response, operation, "GET", CONTRACTS_PATH)
        log_success("GET", CONTRACTS_PATH, response.status_code)
        retorno = data.get("retorno") if isinstance(data, dict) else None
        if not isinstance(retorno, list):
            return []
        return [ContractRecord.from_payload(item) for item in retorno if isinstance(item, dict)]

    async def simulate_refinancing(self, request: SimulationRequest) -> SimulationResponse:
        """Simula refinanciamento dos contratos informados.

        Returns:
            Envelope do parceiro (`results` pode ser None)

        Raises:
            PartnerApiError: Mensagem conforme status (400/401/404/422/500),
                genérica para outros; corpo bruto sempre preservado
        """
        operation = "simulação"
        token = await self._authenticate()
        payload = build_simulation_payload(request, default_prazo=self._default_prazo)
        logger.info(
            "bempromotora_simulation_request",
            extra={
                "cpf": mask_cpf(request.cpf),
                "contracts": len(payload["contratosRefinanciamento"]),
                "prazo": payload["prazo"],
            },
        )

        response = await self._send(
            operation,
            "POST",
            SIMULATION_PATH,
            json=payload,
            headers=self._auth_headers(token),
        )
        if not response.is_success:
            self._raise_logged(
                PartnerApiError(
                    simulation_error_message(response.status_code),
                    response.status_code,
                    response.text,
                    partner_messages=extract_partner_messages(response.text),
                ),
                "POST",
                SIMULATION_PATH,
            )

        data = self._parse_json(response, operation, "POST", SIMULATION_PATH)
        if not isinstance(data, dict):
            self._raise_logged(
                PartnerApiError.malformed_response(
                    f"Resposta inválida do parceiro na {operation}",
                    response.text,
                ),
                "POST",
                SIMULATION_PATH,
            )
        log_success("POST", SIMULATION_PATH, response.status_code)
        return SimulationResponse.from_payload(data)


def create_bempromotora_client(
    settings: BemPromotoraSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> BemPromotoraClient:
    """Factory para criar cliente com settings do ambiente.

    Args:
        settings: BemPromotoraSettings opcional. Se None, carrega do ambiente.
        http_client: Cliente httpx opcional.
    """
    # Import local para evitar dependência circular
    from config.settings import get_bempromotora_settings

    cfg = settings or get_bempromotora_settings()
    return BemPromotoraClient(
        base_url=cfg.api_base_url,
        username=cfg.username,
        password=cfg.password,
        http_client=http_client,
        timeout_seconds=cfg.request_timeout_seconds,
        token_validity=cfg.token_validity,
        default_prazo=cfg.default_prazo,
    )
