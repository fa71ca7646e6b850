"""Configuração do pytest para o projeto consulta_beneficios."""

import sys
from pathlib import Path

# src/ contém vários pacotes de topo (api, app, config, utils)
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))
