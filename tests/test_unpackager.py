# --------------------------------------------------------------
# File: test_unpackager.py
# Description: Pruebas de verificación y descifrado de assets empaquetados.
# --------------------------------------------------------------

import logging
import os
import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from assetpack.errors import AuthenticationFailed, InvalidKeyLength, TruncatedInput
from assetpack.packager import package
from assetpack.unpackager import unpackage, unpackage_file

GLTF_MAGIC = bytes([0x67, 0x6C, 0x54, 0x46])


@pytest.mark.parametrize("size", [0, 1, 4, 100, 4096])
def test_roundtrip(test_key, size):
    """unpackage(package(p, k), k) devuelve exactamente p."""
    plaintext = os.urandom(size)
    assert unpackage(package(plaintext, test_key), test_key) == plaintext


def test_gltf_scenario(test_key, other_key):
    """El prefijo glTF se recupera con la clave correcta y falla con cualquier otra.

    Returns:
        None: Las aserciones cubren el escenario concreto del modelo.
    """
    packaged = package(GLTF_MAGIC, test_key)
    assert len(packaged) == 32
    assert unpackage(packaged, test_key) == b"glTF"
    with pytest.raises(AuthenticationFailed):
        unpackage(packaged, other_key)
    with pytest.raises(AuthenticationFailed):
        unpackage(packaged, os.urandom(32))


def test_empty_plaintext_minimum_file(test_key):
    """Un claro vacío produce un archivo de 28 bytes que se descifra a vacío."""
    packaged = package(b"", test_key)
    assert len(packaged) == 28
    assert unpackage(packaged, test_key) == b""


def test_single_bit_flips_are_detected(test_key):
    """Invertir cualquier bit del archivo provoca AuthenticationFailed.

    Returns:
        None: Se muestrean posiciones aleatorias y se recorren las cabeceras.
    """
    packaged = package(os.urandom(64), test_key)
    rng = random.Random(1234)
    positions = list(range(28 * 8)) + [rng.randrange(len(packaged) * 8) for _ in range(200)]
    for bit in positions:
        mutated = bytearray(packaged)
        mutated[bit // 8] ^= 1 << (bit % 8)
        with pytest.raises(AuthenticationFailed):
            unpackage(bytes(mutated), test_key)


def test_truncated_ciphertext_fails_authentication(test_key):
    """Recortar el ciphertext sin bajar de 28 bytes es un fallo de autenticación."""
    packaged = package(b"glTF model body", test_key)
    with pytest.raises(AuthenticationFailed):
        unpackage(packaged[:-1], test_key)
    with pytest.raises(AuthenticationFailed):
        unpackage(packaged + b"\x00", test_key)


@pytest.mark.parametrize("length", [0, 1, 12, 27])
def test_short_input_is_truncated(test_key, length):
    """Las entradas de menos de 28 bytes fallan con TruncatedInput."""
    with pytest.raises(TruncatedInput):
        unpackage(bytes(length), test_key)


def test_key_length_checked_before_input(test_key):
    """La longitud de la clave se valida antes que la del archivo."""
    with pytest.raises(InvalidKeyLength):
        unpackage(b"", bytes(31))
    with pytest.raises(InvalidKeyLength):
        unpackage(package(b"x", test_key), bytes(33))


def test_authentication_failure_message_is_generic(test_key, other_key):
    """El error no distingue clave incorrecta de datos manipulados."""
    packaged = package(b"secret model", test_key)
    tampered = bytearray(packaged)
    tampered[-1] ^= 0x01

    with pytest.raises(AuthenticationFailed) as wrong_key:
        unpackage(packaged, other_key)
    with pytest.raises(AuthenticationFailed) as corrupted:
        unpackage(bytes(tampered), test_key)

    assert str(wrong_key.value) == str(corrupted.value)
    assert wrong_key.value.__cause__ is None
    assert "secret" not in str(corrupted.value)


def test_unpackage_file(tmp_path, test_key):
    """unpackage_file lee el archivo de disco y devuelve el claro."""
    path = tmp_path / "model.enc"
    path.write_bytes(package(b"glTF-binary", test_key))
    assert unpackage_file(str(path), test_key) == b"glTF-binary"


def test_parallel_roundtrips(test_key, other_key):
    """Empaquetar y desempaquetar desde varios hilos no comparte estado.

    Returns:
        None: Cada hilo recupera exactamente su propio claro.
    """
    inputs = [(os.urandom(n * 37), test_key if n % 2 else other_key) for n in range(64)]

    def _roundtrip(item):
        plaintext, key = item
        return unpackage(package(plaintext, key), key)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(_roundtrip, inputs))
    assert results == [plaintext for plaintext, _ in inputs]


def test_logs_never_contain_key_or_plaintext(test_key, other_key, caplog):
    """Ningún registro, ni de éxito ni de fallo, incluye la clave o el claro.

    Returns:
        None: Se inspeccionan todos los registros emitidos a nivel DEBUG.
    """
    plaintext = b"glTF-secret-mesh-0123456789"
    caplog.set_level(logging.DEBUG, logger="assetpack")

    packaged = package(plaintext, test_key)
    assert unpackage(packaged, test_key) == plaintext
    with pytest.raises(AuthenticationFailed):
        unpackage(packaged, other_key)

    assert caplog.records
    forbidden = [
        test_key.hex(),
        other_key.hex(),
        plaintext.hex(),
        plaintext.decode(),
        repr(test_key),
        repr(plaintext),
    ]
    for record in caplog.records:
        text = record.getMessage()
        assert not any(item in text for item in forbidden)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].name == "assetpack.unpackager"
