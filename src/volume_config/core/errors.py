# src/volume_config/core/errors.py
"""
Exceções canônicas do volume-config.

Este módulo define a hierarquia oficial de exceções levantadas durante a
detecção de referências de volume, o percurso da árvore de configuração
e a leitura de arquivos montados.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de resolução são fatais para a chamada (sem retry)
    - Mensagens identificam arquivo e variável de montagem

Invariantes:
    - Todas as exceções do pacote herdam de `VolumeConfigError`
    - Falhas de leitura são também `OSError` (`IOError`)
    - A causa original é sempre encadeada (`raise ... from exc`)

Limites explícitos:
    - Não formata mensagens para o usuário final
    - Não realiza fallback ou recovery
"""

from typing import Optional


class VolumeConfigError(Exception):
    """
    Exceção base para todos os erros do volume-config.

    Permite captura genérica de falhas de resolução de volume.
    """


class ConfigurationError(VolumeConfigError):
    """
    Exceção levantada quando o caminho de montagem não está definido.

    O provider não retornou valor para a variável de montagem
    (`PCR_VOLUME_MOUNT`). Indica ambiente incompleto e nunca é repetida.
    """


class VolumeFileReadError(VolumeConfigError, OSError):
    """
    Exceção levantada quando um arquivo de volume não pode ser lido.

    Cobre arquivo inexistente, permissão negada, diretório no lugar de
    arquivo e conteúdo que não é UTF-8 válido.

    Attributes:
        filename: Nome do arquivo solicitado (já sem componentes de caminho).
        path: Caminho absoluto efetivamente lido.
        mount_variable: Nome da variável de montagem consultada.
    """

    def __init__(
        self,
        message: str,
        *,
        filename: str,
        path: Optional[str] = None,
        mount_variable: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.filename = filename
        self.path = path
        self.mount_variable = mount_variable

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidVolumeReferenceError(VolumeConfigError, ValueError):
    """Nome de arquivo vazio, `.` ou `..` após remoção dos componentes de caminho."""


class InvalidConfigRootTypeError(VolumeConfigError, TypeError):
    """Exceção levantada quando a raiz da configuração não é um mapeamento."""

