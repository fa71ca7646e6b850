"""App — orquestração, casos de uso e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; utils apoia.
"""
