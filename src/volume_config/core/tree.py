# src/volume_config/core/tree.py
"""
Percurso estrutural da árvore de configuração.

A árvore é composta por mapeamentos (chave → nó), sequências (índice → nó)
e escalares. Cada folha é identificada por uma Path Key estrutural: a
tupla de chaves/índices desde a raiz até ela.

Decisões arquiteturais:
    - O percurso é um visitor recursivo explícito (depth-first)
    - A escrita usa a tupla estrutural, nunca uma string reparseada, então
      chaves contendo `.` não são ambíguas
    - A forma pontilhada (`database.password`) serve apenas para logs,
      mensagens e relatórios

Invariantes:
    - Cada posição da árvore produz no máximo uma referência por percurso
    - O percurso nunca muta a árvore
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, MutableMapping, MutableSequence, Tuple, Union

from .markers import get_as_volume_file

PathKey = Tuple[Union[str, int], ...]


def format_path_key(path: PathKey) -> str:
    return ".".join(str(part) for part in path)


@dataclass(frozen=True)
class VolumeReference:
    """Referência de volume encontrada em uma posição da árvore."""

    path: PathKey
    filename: str
    raw: str

    @property
    def key(self) -> str:
        return format_path_key(self.path)


def _is_mapping(node: Any) -> bool:
    return isinstance(node, MutableMapping)


def _is_sequence(node: Any) -> bool:
    return isinstance(node, MutableSequence)


def iter_volume_references(tree: Any, prefix: PathKey = ()) -> Iterator[VolumeReference]:
    """
    Percorre a árvore em profundidade e produz cada referência de volume.

    Política de percurso:
        - mapeamento → recursão por chave
        - lista → recursão por índice (tuplas são tratadas como escalares)
        - string com marcador → VolumeReference
        - demais escalares (números, booleanos, None, strings comuns) → ignorados

    Args:
        tree (Any): Nó atual (a raiz na chamada externa).
        prefix (PathKey): Caminho estrutural acumulado até o nó.

    Yields:
        VolumeReference: Uma por folha marcada, em ordem de percurso.
    """
    if _is_mapping(tree):
        children = tree.items()
    elif _is_sequence(tree):
        children = enumerate(tree)
    else:
        return

    for key, value in children:
        path = prefix + (key,)

        if _is_mapping(value) or _is_sequence(value):
            yield from iter_volume_references(value, path)
            continue

        filename = get_as_volume_file(value)
        if filename is None:
            continue

        yield VolumeReference(path=path, filename=filename, raw=value)


def set_at_path(tree: MutableMapping[Any, Any], path: PathKey, value: Any) -> None:
    """
    Escreve `value` na posição estrutural `path`.

    Mapeamentos intermediários ausentes são criados. Índices de lista
    precisam existir.

    Raises:
        ValueError: Se `path` for vazio.
        TypeError: Se um nó intermediário for escalar.
    """
    if not path:
        raise ValueError("Path Key vazia não identifica uma folha")

    node: Any = tree
    for part in path[:-1]:
        if _is_mapping(node):
            child = node.get(part)
            if not (_is_mapping(child) or _is_sequence(child)):
                node[part] = {}
            node = node[part]
        elif _is_sequence(node):
            node = node[part]
        else:
            raise TypeError(
                f"Nó intermediário não mutável em {format_path_key(path)}: "
                f"{type(node).__name__}"
            )

    last = path[-1]
    if not (_is_mapping(node) or _is_sequence(node)):
        raise TypeError(
            f"Nó de destino não mutável em {format_path_key(path)}: {type(node).__name__}"
        )
    node[last] = value
