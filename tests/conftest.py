# tests/conftest.py
"""
Fixtures compartilhados para testes do volume-config.

Este módulo define fixtures reutilizáveis que fornecem:
- um diretório de montagem temporário com arquivos de volume
- providers explícitos (com e sem `PCR_VOLUME_MOUNT`)
- árvores de configuração aninhadas semelhantes ao uso real

Decisões arquiteturais:
    - O volume é sempre um diretório sob `tmp_path` (isolado por teste)
    - Providers são injetados explicitamente; o ambiente do processo só é
      tocado via `monkeypatch` nos testes do provider default
    - Árvores são recriadas a cada teste (o motor as muta no lugar)

Limites explícitos:
    - Não contém lógica de resolução
    - Não valida comportamento do motor
"""

import pytest


@pytest.fixture
def volume_dir(tmp_path):
    """
    Diretório de montagem com arquivos de volume típicos.

    Conteúdo:
        - secret.txt → "hello"
        - db-pass    → "s3cr3t\\n"
        - ca.pem     → certificado fictício multilinha
        - passwd     → usado para validar bloqueio de path traversal
    """
    mount = tmp_path / "mnt" / "vol"
    mount.mkdir(parents=True)
    (mount / "secret.txt").write_text("hello", encoding="utf-8")
    (mount / "db-pass").write_text("s3cr3t\n", encoding="utf-8")
    (mount / "ca.pem").write_text(
        "-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n",
        encoding="utf-8",
    )
    (mount / "passwd").write_text("mounted-passwd", encoding="utf-8")
    return mount


@pytest.fixture
def provider(volume_dir):
    from volume_config.core.provider import MappingProvider

    return MappingProvider({"PCR_VOLUME_MOUNT": str(volume_dir)})


@pytest.fixture
def empty_provider():
    from volume_config.core.provider import MappingProvider

    return MappingProvider({})


@pytest.fixture
def nested_config() -> dict:
    """
    Árvore de configuração aninhada com referências em níveis distintos.

    Mistura referências, strings comuns, números, booleanos, None e listas
    para validar que apenas folhas marcadas são alteradas.
    """
    return {
        "service": {"name": "billing", "port": 8080, "debug": False},
        "database": {
            "host": "db.internal",
            "credentials": {
                "user": "billing",
                "password": "volumefile:db-pass",
            },
        },
        "tls": {"ca": "volumefile:certs/ca.pem", "verify": True},
        "api_key": "volumefile:secret.txt",
        "optional": None,
        "hosts": ["a.internal", "volumefile:secret.txt"],
    }
