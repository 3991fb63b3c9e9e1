# src/volume_config/core/resolver.py
"""
Motor de resolução de referências de volume.

Este módulo orquestra a resolução completa de uma árvore de configuração
em duas fases:

    1. coleta  → percorre a árvore e lê todos os arquivos referenciados,
                 acumulando Path Key → conteúdo, sem mutar nada
    2. escrita → aplica cada par coletado sobre a árvore original

Política de falha:
    - A primeira falha (montagem ausente ou leitura) aborta a chamada
    - Como a escrita só começa após a coleta completa, nenhuma árvore fica
      parcialmente resolvida
    - Nenhum erro é engolido

Invariantes:
    - Cada Path Key aparece no máximo uma vez por percurso
    - Conteúdos lidos não são reavaliados (sem resolução aninhada)
    - Uma segunda execução é no-op, exceto se um conteúdo lido contiver o
      marcador (caso conhecido, não corrigido)

Limites explícitos:
    - Não faz cache entre chamadas
    - Não valida o conteúdo dos arquivos
    - Não protege contra chamadas concorrentes sobre a mesma árvore
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, MutableMapping

from .errors import InvalidConfigRootTypeError
from .provider import ValueProvider
from .tree import PathKey, iter_volume_references, set_at_path
from .volume import resolve_volume_file, resolve_volume_file_async

logger = logging.getLogger(__name__)


def _require_mapping(tree: Any) -> None:
    if not isinstance(tree, MutableMapping):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(tree).__name__}"
        )


def collect_volume_files(tree: Mapping[str, Any], provider: ValueProvider) -> Dict[PathKey, str]:
    """
    Fase de coleta: lê todos os arquivos referenciados na árvore.

    Args:
        tree: Árvore de configuração (não é mutada).
        provider: Fonte do caminho de montagem.

    Returns:
        Dict[PathKey, str]: Conteúdo lido por posição estrutural.

    Raises:
        ConfigurationError: Se `PCR_VOLUME_MOUNT` não estiver definido.
        VolumeFileReadError: Se algum arquivo não puder ser lido.
    """
    resolved: Dict[PathKey, str] = {}
    for ref in iter_volume_references(tree):
        logger.debug("Resolvendo %s → volumefile %s", ref.key, ref.filename)
        resolved[ref.path] = resolve_volume_file(provider, ref.filename)
    return resolved


async def collect_volume_files_async(
    tree: Mapping[str, Any], provider: ValueProvider
) -> Dict[PathKey, str]:
    """Variante assíncrona da coleta; as leituras são disparadas em paralelo."""
    refs = list(iter_volume_references(tree))
    for ref in refs:
        logger.debug("Resolvendo %s → volumefile %s", ref.key, ref.filename)

    contents = await asyncio.gather(
        *(resolve_volume_file_async(provider, ref.filename) for ref in refs)
    )
    return {ref.path: content for ref, content in zip(refs, contents)}


def apply_volume_files(tree: MutableMapping[str, Any], resolved: Mapping[PathKey, str]) -> None:
    """Fase de escrita: sobrescreve cada referência com o conteúdo coletado."""
    for path, content in resolved.items():
        set_at_path(tree, path, content)


def _report(resolved: Dict[PathKey, str]) -> Dict[PathKey, str]:
    if resolved:
        logger.info("%d referência(s) de volume resolvida(s)", len(resolved))
    return resolved


def resolve_volume_files(tree: MutableMapping[str, Any], provider: ValueProvider) -> Dict[PathKey, str]:
    """
    Resolve todas as referências de volume da árvore, mutando-a no lugar.

    Exemplo:
        {"database": {"password": "volumefile:db-pass"}}
        → {"database": {"password": "<conteúdo de $PCR_VOLUME_MOUNT/db-pass>"}}

    Args:
        tree: Árvore de configuração do chamador.
        provider: Fonte do caminho de montagem.

    Returns:
        Dict[PathKey, str]: Posição estrutural → conteúdo substituído
        (vazio quando não há referências). As chaves são tuplas, não strings
        pontilhadas: `{"a.b": ...}` e `{"a": {"b": ...}}` são posições distintas.

    Raises:
        InvalidConfigRootTypeError: Se a raiz não for um mapeamento.
        ConfigurationError: Se `PCR_VOLUME_MOUNT` não estiver definido.
        VolumeFileReadError: Se algum arquivo não puder ser lido.
    """
    _require_mapping(tree)
    resolved = collect_volume_files(tree, provider)
    apply_volume_files(tree, resolved)
    return _report(resolved)


async def resolve_volume_files_async(
    tree: MutableMapping[str, Any], provider: ValueProvider
) -> Dict[PathKey, str]:
    """Variante assíncrona de `resolve_volume_files`, com a mesma garantia tudo-ou-nada."""
    _require_mapping(tree)
    resolved = await collect_volume_files_async(tree, provider)
    apply_volume_files(tree, resolved)
    return _report(resolved)
