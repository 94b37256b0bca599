# --------------------------------------------------------------
# File: unpackager.py
# Description: Verificación y descifrado de un asset empaquetado.
# --------------------------------------------------------------
"""Consumidor del formato `[nonce][tag][ciphertext]` en tiempo de carga."""

import logging

from assetpack.crypto_sym import aes_gcm_decrypt_with_key, check_key
from assetpack.errors import AuthenticationFailed
from assetpack.format import split_packaged
from assetpack.storage import read_bytes

logger = logging.getLogger(__name__)


def _open(packaged: bytes, key: bytes) -> bytes:
    """Separa y descifra con una clave ya validada."""

    nonce, tag, ciphertext = split_packaged(packaged)
    try:
        plaintext = aes_gcm_decrypt_with_key(key, nonce, ciphertext, tag)
    except AuthenticationFailed:
        logger.warning("Fallo de autenticación al desempaquetar %d bytes", len(packaged))
        raise
    logger.debug("Asset desempaquetado: %d bytes en claro", len(plaintext))
    return plaintext


def unpackage(packaged: bytes, key: bytes) -> bytes:
    """Descifra un asset empaquetado verificando su autenticidad.

    Args:
        packaged (bytes): Contenido completo del archivo empaquetado.
        key (bytes): Clave compartida de 32 bytes.

    Returns:
        bytes: Asset original en claro.

    Raises:
        InvalidKeyLength: Si la clave no mide 32 bytes.
        TruncatedInput: Si el archivo tiene menos de 28 bytes.
        AuthenticationFailed: Si el tag no verifica (corrupción, manipulación
            o clave incorrecta, sin distinguir la causa).

    """

    check_key(key)
    return _open(packaged, key)


def unpackage_file(path: str, key: bytes) -> bytes:
    """Lee un archivo empaquetado de disco y devuelve el asset en claro."""

    check_key(key)
    plaintext = _open(read_bytes(path), key)
    logger.info("Desempaquetado %s (%d bytes)", path, len(plaintext))
    return plaintext
