"""Testes para app.bootstrap (logging, validação de settings, wiring)."""

from __future__ import annotations

import logging

import pytest

from api.connectors.bempromotora import BemPromotoraClient
from app.bootstrap import (
    get_bempromotora_client,
    get_listar_contratos,
    get_simular_refinanciamento,
    initialize_app,
    validate_runtime_settings,
)
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from app.use_cases.refinanciamento import ListarContratosRefinanciaveis, SimularRefinanciamento
from config.settings import get_base_settings, get_bempromotora_settings


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch):
    for var in (
        "ENVIRONMENT",
        "SERVICE_NAME",
        "BEMPROMOTORA_USERNAME",
        "BEMPROMOTORA_PASSWORD",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    get_base_settings.cache_clear()
    get_bempromotora_settings.cache_clear()
    get_bempromotora_client.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_bempromotora_settings.cache_clear()
    get_bempromotora_client.cache_clear()
    root.handlers = handlers
    root.setLevel(level)


class TestValidateRuntimeSettings:
    """Testes para validate_runtime_settings."""

    def test_development_only_warns(self) -> None:
        """Em development, credenciais ausentes não bloqueiam."""
        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Em produção, credenciais ausentes impedem o boot."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        with pytest.raises(RuntimeError, match="BEMPROMOTORA_USERNAME"):
            validate_runtime_settings()

    def test_production_ok_with_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Em produção, configuração completa passa."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("BEMPROMOTORA_USERNAME", "u")
        monkeypatch.setenv("BEMPROMOTORA_PASSWORD", "p")
        validate_runtime_settings()


class TestInitializeApp:
    """Testes para initialize_app."""

    def test_configures_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL define o nível do logger raiz."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        initialize_app()
        assert logging.getLogger().level == logging.WARNING

    def test_service_name_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """SERVICE_NAME chega ao campo service dos logs."""
        monkeypatch.setenv("SERVICE_NAME", "consulta_homolog")
        initialize_app()
        (handler,) = logging.getLogger().handlers
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        for log_filter in handler.filters:
            log_filter.filter(record)
        assert record.service == "consulta_homolog"


class TestWiring:
    """Testes dos getters do composition root."""

    def test_client_is_singleton(self) -> None:
        """Mesmo cliente (e mesmo cache de token) no processo."""
        client = get_bempromotora_client()
        assert isinstance(client, BemPromotoraClient)
        assert get_bempromotora_client() is client

    def test_use_cases_share_client(self) -> None:
        """Casos de uso recebem o cliente singleton."""
        listar = get_listar_contratos()
        simular = get_simular_refinanciamento()
        assert isinstance(listar, ListarContratosRefinanciaveis)
        assert isinstance(simular, SimularRefinanciamento)
        assert listar._client is simular._client is get_bempromotora_client()


class TestCorrelationId:
    """Testes para correlation_id."""

    def test_set_and_reset(self) -> None:
        """set define e reset restaura o valor anterior."""
        token = set_correlation_id("req-1")
        assert get_correlation_id() == "req-1"
        reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_generates_when_none(self) -> None:
        """Sem valor, gera UUID."""
        token = set_correlation_id()
        assert len(get_correlation_id()) == 36
        reset_correlation_id(token)
