"""Connectors por parceiro — adapters de borda para APIs externas.

Estrutura:
- bempromotora/: API Bem Promotora (contratos e refinanciamento)

Cada parceiro tem seu próprio connector, garantindo isolamento de falhas.
"""

__all__: list[str] = []
