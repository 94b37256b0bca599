# --------------------------------------------------------------
# File: packager.py
# Description: Cifrado de un asset en claro y empaquetado en un único buffer.
# --------------------------------------------------------------
"""Productor del formato `[nonce][tag][ciphertext]` en la fase de build."""

import logging
from typing import Optional

from assetpack.crypto_sym import aes_gcm_encrypt_with_key, check_key
from assetpack.format import join_packaged
from assetpack.models import PackResult
from assetpack.storage import read_bytes, write_bytes_atomic

logger = logging.getLogger(__name__)


def _seal(plaintext: bytes, key: bytes, nonce: Optional[bytes] = None) -> bytes:
    """Cifra con una clave ya validada y concatena las tres regiones."""

    ciphertext, used_nonce, tag = aes_gcm_encrypt_with_key(key, plaintext, nonce=nonce)
    packaged = join_packaged(used_nonce, tag, ciphertext)
    logger.debug("Asset empaquetado: %d bytes en claro, %d bytes empaquetados", len(plaintext), len(packaged))
    return packaged


def package(plaintext: bytes, key: bytes, *, nonce: Optional[bytes] = None) -> bytes:
    """Cifra un asset con AES-256-GCM y devuelve `nonce || tag || ciphertext`.

    Args:
        plaintext (bytes): Contenido del asset; puede estar vacío.
        key (bytes): Clave compartida de 32 bytes.
        nonce (Optional[bytes]): Nonce fijo para pruebas deterministas. Por
            defecto se genera uno aleatorio en cada llamada.

    Returns:
        bytes: Archivo empaquetado de `len(plaintext) + 28` bytes.

    Raises:
        InvalidKeyLength: Si la clave no mide 32 bytes.
        RandomSourceUnavailable: Si no se puede generar el nonce.

    """

    check_key(key)
    return _seal(plaintext, key, nonce)


def package_file(input_path: str, output_path: str, key: bytes) -> PackResult:
    """Empaqueta un archivo en disco y escribe el resultado de forma atómica.

    Args:
        input_path (str): Asset en claro (por ejemplo un `.glb`).
        output_path (str): Destino del archivo empaquetado.
        key (bytes): Clave compartida de 32 bytes.

    Returns:
        PackResult: Rutas y tamaños de la operación.

    """

    # La clave se valida antes de leer el asset.
    check_key(key)
    plaintext = read_bytes(input_path)
    packaged = _seal(plaintext, key)
    write_bytes_atomic(packaged, output_path)
    logger.info("Empaquetado %s -> %s (%d bytes)", input_path, output_path, len(packaged))
    return PackResult(
        input_path=str(input_path),
        output_path=str(output_path),
        plaintext_size=len(plaintext),
        packaged_size=len(packaged),
    )
