# src/volume_config/client.py
"""
Fachada pública do volume-config.

O cliente associa um Value Provider (default: variáveis de ambiente) às
três operações do motor:

    - resolve_volume_file   → leitura de um único arquivo do volume
    - is_volume_file        → detecção do marcador (síncrona, pura)
    - resolve_volume_files  → resolução da árvore inteira, no lugar

Exceções do motor são repassadas sem alteração.
"""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

from .core.markers import get_as_volume_file
from .core.provider import ValueProvider, default_provider
from .core.resolver import resolve_volume_files, resolve_volume_files_async
from .core.volume import resolve_volume_file, resolve_volume_file_async


class VolumeConfigClient:
    """
    Cliente de resolução de referências de volume.

    Exemplo:
        client = create_client()
        config = {"database": {"password": "volumefile:db-pass"}}
        client.resolve_volume_files(config)
    """

    def __init__(self, provider: Optional[ValueProvider] = None) -> None:
        self.provider = provider if provider is not None else default_provider()

    def resolve_volume_file(self, filename: str) -> str:
        """
        Lê um único arquivo do volume montado.

        Args:
            filename (str): Nome do arquivo (componentes de caminho são descartados).

        Returns:
            str: Conteúdo integral do arquivo, decodificado como UTF-8.

        Raises:
            ConfigurationError: Se `PCR_VOLUME_MOUNT` não estiver definido.
            InvalidVolumeReferenceError: Se o nome não for utilizável.
            VolumeFileReadError: Se a leitura falhar.
        """
        return resolve_volume_file(self.provider, filename)

    async def resolve_volume_file_async(self, filename: str) -> str:
        """Variante assíncrona de `resolve_volume_file`, com as mesmas exceções."""
        return await resolve_volume_file_async(self.provider, filename)

    def is_volume_file(self, value: Any) -> Optional[str]:
        """Retorna o nome do arquivo referenciado, ou None se `value` não for referência."""
        return get_as_volume_file(value)

    def resolve_volume_files(self, tree: MutableMapping[str, Any]) -> None:
        """
        Resolve todas as referências de volume da árvore, mutando-a no lugar.

        Em caso de erro a árvore permanece intacta (nenhuma escrita parcial).

        Args:
            tree (MutableMapping[str, Any]): Árvore de configuração do chamador.

        Raises:
            InvalidConfigRootTypeError: Se a raiz não for um mapeamento.
            ConfigurationError: Se houver referências e `PCR_VOLUME_MOUNT` não estiver definido.
            VolumeFileReadError: Se algum arquivo referenciado não puder ser lido.
        """
        resolve_volume_files(tree, self.provider)

    async def resolve_volume_files_async(self, tree: MutableMapping[str, Any]) -> None:
        """Variante assíncrona de `resolve_volume_files`; as leituras ocorrem em paralelo."""
        await resolve_volume_files_async(tree, self.provider)


def create_client(*, provider: Optional[ValueProvider] = None) -> VolumeConfigClient:
    """
    Cria um cliente associado a um Value Provider.

    Args:
        provider (Optional[ValueProvider]): Fonte de `PCR_VOLUME_MOUNT`;
            quando omitido, variáveis de ambiente do processo.

    Returns:
        VolumeConfigClient: Cliente pronto para uso.
    """
    return VolumeConfigClient(provider=provider)
