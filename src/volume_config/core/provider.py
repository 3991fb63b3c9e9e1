# src/volume_config/core/provider.py
"""
Value Providers do volume-config.

Um provider resolve uma chave nomeada (ex.: `PCR_VOLUME_MOUNT`) para uma
string, desacoplando o motor de resolução da origem do valor.

Contrato:
    - `get(key)` retorna a string associada ou `None` quando ausente
    - Nenhuma exceção é levantada para chaves inexistentes

Implementações:
    - EnvironmentProvider → variáveis de ambiente do processo (default)
    - MappingProvider     → mapeamento explícito (testes, chamadores)
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ValueProvider(Protocol):
    """Capacidade mínima de consulta de valores por chave."""

    def get(self, key: str) -> Optional[str]:
        ...


class EnvironmentProvider:
    """
    Provider default baseado em variáveis de ambiente.

    O ambiente é consultado a cada chamada (sem snapshot), de modo que
    alterações posteriores em `os.environ` são observadas.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    def get(self, key: str) -> Optional[str]:
        environ = self._environ if self._environ is not None else os.environ
        return environ.get(key)


class MappingProvider:
    """Provider sobre um mapeamento explícito chave → valor."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)


def default_provider() -> ValueProvider:
    return EnvironmentProvider()
