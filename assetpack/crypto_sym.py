# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-GCM para cifrar y descifrar assets.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado sobre buffers completos.

El buffer se procesa por bloques con la interfaz `Cipher` de `cryptography`,
ya que `AESGCM` no admite entradas de 2**31 bytes o más.
"""

import os
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from assetpack.errors import AuthenticationFailed, InvalidKeyLength, RandomSourceUnavailable
from assetpack.format import KEY_LENGTH, NONCE_LENGTH

# Tamaño de cada bloque entregado al cifrador (64 MiB).
CHUNK_SIZE = 64 * 1024 * 1024


def check_key(key: bytes) -> None:
    """Rechaza cualquier clave que no mida exactamente 256 bits."""

    if len(key) != KEY_LENGTH:
        raise InvalidKeyLength(len(key), KEY_LENGTH)


def secure_random(length: int) -> bytes:
    """Lee `length` bytes del generador aleatorio del sistema operativo.

    Args:
        length (int): Número de bytes solicitados.

    Returns:
        bytes: Bytes aleatorios criptográficamente seguros.

    Raises:
        RandomSourceUnavailable: Si el sistema no puede proporcionarlos.

    """

    try:
        return os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailable("El generador aleatorio seguro no está disponible.") from exc


def _run_chunks(context, data: bytes) -> bytearray:
    """Pasa `data` por el contexto de cifrado en bloques de `CHUNK_SIZE`."""

    view = memoryview(data)
    out = bytearray()
    for start in range(0, len(view), CHUNK_SIZE):
        out += context.update(view[start:start + CHUNK_SIZE])
    return out


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, nonce: Optional[bytes] = None
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave ya validada.

    La longitud de la clave la comprueban los puntos de entrada públicos
    (`package`, `package_file`) mediante `check_key`.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar, pueden estar vacíos.
        nonce (Optional[bytes]): Nonce fijo de 96 bits; solo para pruebas.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, nonce y tag.

    """

    if nonce is None:
        nonce = secure_random(NONCE_LENGTH)
    elif len(nonce) != NONCE_LENGTH:
        raise ValueError(f"El nonce debe tener {NONCE_LENGTH} bytes.")
    nonce = bytes(nonce)
    encryptor = Cipher(algorithms.AES(bytes(key)), modes.GCM(nonce)).encryptor()
    ciphertext = _run_chunks(encryptor, plaintext)
    ciphertext += encryptor.finalize()
    return bytes(ciphertext), nonce, encryptor.tag


def aes_gcm_decrypt_with_key(key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes) -> bytes:
    """Descifra datos con AES-GCM verificando la etiqueta de autenticación.

    Ningún byte descifrado sale de la función hasta que `finalize` verifica
    la etiqueta.

    Args:
        key (bytes): Clave simétrica ya validada que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        AuthenticationFailed: Si la etiqueta no verifica, sea cual sea la causa.

    """

    decryptor = Cipher(algorithms.AES(bytes(key)), modes.GCM(bytes(nonce), bytes(tag))).decryptor()
    plaintext = _run_chunks(decryptor, ciphertext)
    try:
        plaintext += decryptor.finalize()
    except InvalidTag:
        raise AuthenticationFailed() from None
    return bytes(plaintext)
