# src/volume_config/core/volume.py
"""
Resolução do caminho de montagem e leitura de arquivos de volume.

Dado um nome de arquivo, este módulo:
    1. consulta o provider pela variável `PCR_VOLUME_MOUNT`
    2. concatena montagem + nome em um caminho absoluto
    3. lê o arquivo como texto UTF-8

Decisões arquiteturais:
    - Uma única tentativa por arquivo (sem retry)
    - Sem cache: cada chamada implica uma leitura no filesystem
    - Caminhos relativos são resolvidos contra a montagem, nunca contra o
      diretório de trabalho do processo
    - O conteúdo lido nunca é registrado em log

Limites explícitos:
    - Não percorre árvores de configuração
    - Não interpreta o conteúdo lido
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from .errors import ConfigurationError, InvalidVolumeReferenceError, VolumeFileReadError
from .markers import volume_file_name
from .provider import ValueProvider

logger = logging.getLogger(__name__)

PCR_VOLUME_MOUNT = "PCR_VOLUME_MOUNT"


def get_volume_mount(provider: ValueProvider, filename: str = "") -> str:
    """
    Obtém o diretório de montagem a partir do provider.

    Raises:
        ConfigurationError: Se o provider não retornar valor (ou retornar vazio).
    """
    mount = provider.get(PCR_VOLUME_MOUNT)
    if not mount:
        raise ConfigurationError(
            f"Não foi possível resolver o arquivo de volume {filename!r}: "
            f"{PCR_VOLUME_MOUNT} não definido"
        )
    return mount


def volume_file_path(mount: str, filename: str) -> Path:
    """
    Concatena montagem e nome de arquivo em um caminho absoluto normalizado.

    O nome é reduzido novamente ao último segmento, de modo que o caminho
    resultante sempre fica dentro de `mount`.

    Raises:
        InvalidVolumeReferenceError: Se o nome não contiver segmento utilizável.
    """
    name = volume_file_name(filename)
    if name is None:
        raise InvalidVolumeReferenceError(
            f"Referência de volume inválida: {filename!r}"
        )
    return Path(os.path.abspath(os.path.join(mount, name)))


def _prepare(provider: ValueProvider, filename: str) -> Path:
    mount = get_volume_mount(provider, filename)
    path = volume_file_path(mount, filename)
    logger.debug("Lendo arquivo de volume %s de %s", path.name, PCR_VOLUME_MOUNT)
    return path


def _read_volume_file(path: Path, filename: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise VolumeFileReadError(
            f"Não foi possível resolver o arquivo de volume {filename!r} "
            f"a partir de {PCR_VOLUME_MOUNT}: {exc}",
            filename=filename,
            path=str(path),
            mount_variable=PCR_VOLUME_MOUNT,
        ) from exc


def resolve_volume_file(provider: ValueProvider, filename: str) -> str:
    """
    Lê o conteúdo de um arquivo do volume montado.

    Args:
        provider (ValueProvider): Fonte do caminho de montagem.
        filename (str): Nome do arquivo (componentes de caminho são descartados).

    Returns:
        str: Conteúdo integral do arquivo, decodificado como UTF-8.

    Raises:
        ConfigurationError: Se `PCR_VOLUME_MOUNT` não estiver definido.
        InvalidVolumeReferenceError: Se o nome não for utilizável.
        VolumeFileReadError: Se a leitura falhar (inexistente, permissão, encoding).
    """
    path = _prepare(provider, filename)
    return _read_volume_file(path, path.name)


async def resolve_volume_file_async(provider: ValueProvider, filename: str) -> str:
    """Variante assíncrona de `resolve_volume_file`; a leitura ocorre em thread auxiliar."""
    path = _prepare(provider, filename)
    return await asyncio.to_thread(_read_volume_file, path, path.name)
