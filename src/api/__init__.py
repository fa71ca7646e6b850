"""API — camada de borda e adapters de parceiros.

Responsabilidades:
- Falar HTTP com APIs externas (autenticação, consultas, simulações)
- Construir payloads no formato de cada parceiro
- Normalizar respostas e erros para modelos internos

Subpastas:
- connectors/: adapters HTTP por parceiro

NÃO PODE conter: regras de negócio nem orquestração de use cases.
"""
