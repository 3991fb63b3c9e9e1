# tests/test_client.py
"""
Testes da fachada pública (VolumeConfigClient / create_client).

Os testes asseguram que:
- o cliente usa variáveis de ambiente quando nenhum provider é informado
- providers customizados são respeitados
- as três operações delegam ao motor e repassam exceções sem alteração
- a resolução da árvore muta o objeto recebido e não retorna valor
"""

import asyncio
import copy

import pytest

try:
    from volume_config import (
        ConfigurationError,
        EnvironmentProvider,
        VolumeConfigClient,
        VolumeFileReadError,
        create_client,
    )
except Exception as e:  # noqa: BLE001
    create_client = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing client facade. Implement:\n"
            "- src/volume_config/client.py (VolumeConfigClient, create_client)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_default_provider_is_environment():
    _require_imports()
    client = create_client()
    assert isinstance(client, VolumeConfigClient)
    assert isinstance(client.provider, EnvironmentProvider)


def test_default_provider_resolves_from_environment(monkeypatch, volume_dir):
    _require_imports()
    monkeypatch.setenv("PCR_VOLUME_MOUNT", str(volume_dir))
    client = create_client()

    tree = {"database": {"password": "volumefile:db-pass"}}
    assert client.resolve_volume_files(tree) is None
    assert tree == {"database": {"password": "s3cr3t\n"}}


def test_custom_provider(provider):
    _require_imports()
    client = create_client(provider=provider)
    assert client.provider is provider
    assert client.resolve_volume_file("secret.txt") == "hello"


def test_is_volume_file_returns_filename():
    _require_imports()
    client = create_client()
    assert client.is_volume_file("volumefile:certs/ca.pem") == "ca.pem"
    assert client.is_volume_file("plain") is None
    assert client.is_volume_file(7) is None


def test_errors_are_propagated_unchanged(empty_provider, provider, nested_config):
    _require_imports()
    before = copy.deepcopy(nested_config)

    with pytest.raises(ConfigurationError):
        create_client(provider=empty_provider).resolve_volume_files(nested_config)
    assert nested_config == before

    with pytest.raises(VolumeFileReadError):
        create_client(provider=provider).resolve_volume_file("nope")


def test_async_operations(provider, nested_config):
    _require_imports()
    client = create_client(provider=provider)

    assert asyncio.run(client.resolve_volume_file_async("secret.txt")) == "hello"
    assert asyncio.run(client.resolve_volume_files_async(nested_config)) is None
    assert nested_config["api_key"] == "hello"


@pytest.mark.parametrize(
    "operation",
    ["resolve_volume_file", "resolve_volume_files"],
)
def test_public_operations_document_their_errors(operation):
    _require_imports()
    doc = getattr(VolumeConfigClient, operation).__doc__ or ""
    assert "Raises:" in doc
    assert "ConfigurationError" in doc
    assert "VolumeFileReadError" in doc
    assert "Returns:" in (create_client.__doc__ or "")


def test_public_surface_is_resolution_only():
    """
    Verifica que o pacote expõe apenas a resolução de volumes.

    Carregar e interpretar arquivos de configuração é responsabilidade do
    chamador: o pacote recebe a árvore já interpretada.
    """
    _require_imports()
    import importlib.util

    import volume_config

    assert importlib.util.find_spec("volume_config.core.config") is None
    assert "load_config" not in volume_config.__all__
    assert set(volume_config.__all__) >= {
        "create_client",
        "resolve_volume_file",
        "resolve_volume_files",
        "get_as_volume_file",
    }
