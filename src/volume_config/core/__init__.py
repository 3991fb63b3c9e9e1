# src/volume_config/core/__init__.py
"""
Core do volume-config.

Módulos:
    - core.markers  → detecção do marcador `volumefile:`
    - core.volume   → caminho de montagem e leitura de arquivos
    - core.tree     → percurso estrutural e escrita por posição
    - core.resolver → resolução em duas fases (coleta, escrita)
    - core.provider → Value Providers (ambiente, mapeamento)
    - core.errors   → hierarquia de exceções
"""
