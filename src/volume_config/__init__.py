# src/volume_config/__init__.py
"""
volume-config — resolução de referências a arquivos montados em configurações.

Valores de configuração da forma `volumefile:<nome>` são substituídos pelo
conteúdo de `<nome>` dentro do diretório indicado por `PCR_VOLUME_MOUNT`
(segredos, certificados e afins injetados pela plataforma).

Limites explícitos:
    - Não é um sistema de templates nem de gestão de segredos
    - Não resolve referências dentro do conteúdo lido
    - Não mantém cache entre chamadas
"""

from .client import VolumeConfigClient, create_client
from .core.errors import (
    ConfigurationError,
    InvalidConfigRootTypeError,
    InvalidVolumeReferenceError,
    VolumeConfigError,
    VolumeFileReadError,
)
from .core.markers import VOLUME_FILE_PREFIX, get_as_volume_file, is_volume_file
from .core.provider import EnvironmentProvider, MappingProvider, ValueProvider
from .core.resolver import resolve_volume_files, resolve_volume_files_async
from .core.volume import PCR_VOLUME_MOUNT, resolve_volume_file, resolve_volume_file_async

__all__ = [
    "VolumeConfigClient",
    "create_client",
    "ConfigurationError",
    "InvalidConfigRootTypeError",
    "InvalidVolumeReferenceError",
    "VolumeConfigError",
    "VolumeFileReadError",
    "VOLUME_FILE_PREFIX",
    "get_as_volume_file",
    "is_volume_file",
    "EnvironmentProvider",
    "MappingProvider",
    "ValueProvider",
    "resolve_volume_files",
    "resolve_volume_files_async",
    "PCR_VOLUME_MOUNT",
    "resolve_volume_file",
    "resolve_volume_file_async",
]
