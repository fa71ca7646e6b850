"""Modelos da API Bem Promotora (contratos e refinanciamento)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _as_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_bool(value: Any) -> bool:
    """Só `true` explícito conta: bool, 1 ou "true"/"1" em texto."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1")
    return False


def _as_optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass(frozen=True)
class ContractRecord:
    """Contrato existente, como informado pelo parceiro (somente leitura)."""

    contrato: str
    data_contrato: str
    pmt_original: float
    refinanciavel: bool
    conveniada: str
    matricula: str
    conveniada_descricao: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> ContractRecord:
        return cls(
            contrato=str(data.get("contrato", "")),
            data_contrato=str(data.get("dataContrato", "")),
            pmt_original=_as_float(data.get("pmtOriginal")),
            refinanciavel=_as_bool(data.get("refinanciavel")),
            conveniada=str(data.get("conveniada", "")),
            matricula=str(data.get("matricula", "")),
            conveniada_descricao=_as_optional_str(data.get("conveniadaDescricao")),
            raw=dict(data),
        )


@dataclass(frozen=True)
class ContractToRefinance:
    """Contrato a ser refinanciado (número + data de origem)."""

    contrato: str
    data_contrato: str


@dataclass(frozen=True)
class SimulationRequest:
    """Entrada da simulação de refinanciamento.

    Datas são strings opacas; `prazo` ausente usa o padrão configurado.
    """

    cpf: str
    data_nascimento: str
    conveniada: str
    contratos: tuple[ContractToRefinance, ...]
    prestacao: float
    prazo: str | None = None
    retornar_somente_operacoes_viaveis: bool = True
    tipo_simulacao: str | None = None
    plano: str | None = None
    valor_desejado: float | None = None


@dataclass(frozen=True)
class AmortizationRow:
    parcela: int
    valor_parcela: float
    valor_juros: float
    valor_amortizacao: float
    saldo_devedor: float

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> AmortizationRow:
        return cls(
            parcela=_as_int(data.get("parcela")),
            valor_parcela=_as_float(data.get("valorParcela")),
            valor_juros=_as_float(data.get("valorJuros")),
            valor_amortizacao=_as_float(data.get("valorAmortizacao")),
            saldo_devedor=_as_float(data.get("saldoDevedor")),
        )


@dataclass(frozen=True)
class SimulationResult:
    """Uma oferta de refinanciamento simulada."""

    valor_af: float
    prazo: str
    descricao_plano: str
    taxa: float
    valor_parcela: float
    valor_total: float
    tabela: tuple[AmortizationRow, ...] | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> SimulationResult:
        raw_table = data.get("tabela")
        tabela = (
            tuple(AmortizationRow.from_payload(row) for row in raw_table if isinstance(row, dict))
            if isinstance(raw_table, list)
            else None
        )
        return cls(
            valor_af=_as_float(data.get("valorAF")),
            prazo=str(data.get("prazo", "")),
            descricao_plano=str(data.get("descricaoPlano", "")),
            taxa=_as_float(data.get("taxa")),
            valor_parcela=_as_float(data.get("valorParcela")),
            valor_total=_as_float(data.get("valorTotal")),
            tabela=tabela,
        )


@dataclass(frozen=True)
class SimulationResponse:
    """Envelope de resposta da simulação.

    `results` é None quando o parceiro devolve `retorno: null`.
    """

    results: tuple[SimulationResult, ...] | None
    error: str | None = None
    error_code: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def has_results(self) -> bool:
        return bool(self.results)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> SimulationResponse:
        retorno = data.get("retorno")
        results = (
            tuple(SimulationResult.from_payload(item) for item in retorno if isinstance(item, dict))
            if isinstance(retorno, list)
            else None
        )
        return cls(
            results=results,
            error=data.get("erro"),
            error_code=data.get("codigoErro"),
            raw=dict(data),
        )
