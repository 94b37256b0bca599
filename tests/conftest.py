# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con claves de prueba y entorno aislado.
# --------------------------------------------------------------

from typing import Iterator

import pytest

# Clave conocida de 32 bytes usada en los escenarios deterministas.
TEST_KEY = bytes.fromhex("000102030405060708090a0b0c0d0e0f000102030405060708090a0b0c0d0e0f")


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla el directorio de trabajo y elimina claves del entorno.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ASSET_KEY", raising=False)
    yield


@pytest.fixture
def test_key() -> bytes:
    """Devuelve la clave fija de pruebas."""
    return TEST_KEY


@pytest.fixture
def other_key() -> bytes:
    """Devuelve una clave de 32 bytes distinta de la de pruebas."""
    return bytes(range(32, 64))
