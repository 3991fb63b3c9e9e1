# src/volume_config/core/markers.py
"""
Detecção de referências de volume.

Um valor de configuração é uma referência de volume quando é uma string
que contém o prefixo marcador `volumefile:`. O nome do arquivo é o texto
após a primeira ocorrência do marcador, reduzido ao seu último segmento
de caminho.

Política de detecção (v1):
    - não-string             → sem correspondência
    - string sem o marcador  → sem correspondência
    - marcador repetido      → sem correspondência (valor tratado como literal)
    - nome vazio, `.` ou `..` → sem correspondência

Invariantes:
    - Funções puras, sem efeitos colaterais
    - O nome retornado nunca contém separadores de caminho
    - O nome retornado nunca sai do diretório de montagem ao ser concatenado

Limites explícitos:
    - Não lê arquivos
    - Não consulta o provider
"""

import posixpath
from typing import Any, Optional


VOLUME_FILE_PREFIX = "volumefile:"

_UNSAFE_NAMES = {"", ".", ".."}


def volume_file_name(reference: str) -> Optional[str]:
    """
    Reduz uma referência ao seu último segmento de caminho.

    `/` e `\\` são tratados como separadores, independentemente da
    plataforma, para que `..\\..\\x` não escape do volume em nenhum host.

    Args:
        reference (str): Texto após o marcador (ou nome cru informado pelo chamador).

    Returns:
        Optional[str]: O nome do arquivo, ou None se nada utilizável restar.
    """
    name = posixpath.basename(reference.replace("\\", "/"))
    if name in _UNSAFE_NAMES:
        return None
    return name


def get_as_volume_file(value: Any) -> Optional[str]:
    """
    Classifica um valor como referência de volume e extrai o nome do arquivo.

    Exemplos:
        - "volumefile:secret.txt"          → "secret.txt"
        - "volumefile:../../etc/passwd"    → "passwd"
        - "prefix volumefile:certs/ca.pem" → "ca.pem"
        - "volumefile:"                    → None
        - 42                               → None

    Strings com o marcador repetido (ex.: conteúdo já resolvido que embute
    outra referência) são rejeitadas e permanecem como dado literal.

    Args:
        value (Any): Valor escalar arbitrário da árvore de configuração.

    Returns:
        Optional[str]: Nome do arquivo referenciado, ou None.
    """
    if not isinstance(value, str):
        return None

    index = value.find(VOLUME_FILE_PREFIX)
    if index < 0:
        return None

    reference = value[index + len(VOLUME_FILE_PREFIX):]
    if VOLUME_FILE_PREFIX in reference:
        return None

    return volume_file_name(reference)


def is_volume_file(value: Any) -> bool:
    return get_as_volume_file(value) is not None
