# --------------------------------------------------------------
# File: format.py
# Description: Constantes y disposición binaria del archivo empaquetado.
# --------------------------------------------------------------
"""Formato `[nonce][tag][ciphertext]` sin cabecera ni byte de versión."""

from typing import Tuple

from assetpack.errors import TruncatedInput

KEY_LENGTH = 32
NONCE_LENGTH = 12
TAG_LENGTH = 16
HEADER_LENGTH = NONCE_LENGTH + TAG_LENGTH


def packaged_length(plaintext_length: int) -> int:
    """Devuelve el tamaño del archivo empaquetado para un claro dado."""

    return plaintext_length + HEADER_LENGTH


def split_packaged(packaged: bytes) -> Tuple[bytes, bytes, bytes]:
    """Separa un archivo empaquetado en sus tres regiones.

    Args:
        packaged (bytes): Contenido completo del archivo empaquetado.

    Returns:
        Tuple[bytes, bytes, bytes]: Nonce, tag y ciphertext.

    Raises:
        TruncatedInput: Si no alcanza la longitud mínima de 28 bytes.

    """

    data = bytes(packaged)
    if len(data) < HEADER_LENGTH:
        raise TruncatedInput(len(data), HEADER_LENGTH)
    nonce = data[:NONCE_LENGTH]
    tag = data[NONCE_LENGTH:HEADER_LENGTH]
    ciphertext = data[HEADER_LENGTH:]
    return nonce, tag, ciphertext


def join_packaged(nonce: bytes, tag: bytes, ciphertext: bytes) -> bytes:
    """Concatena nonce, tag y ciphertext en el orden fijo del formato.

    Raises:
        ValueError: Si el nonce o el tag no tienen la longitud del protocolo.

    """

    if len(nonce) != NONCE_LENGTH:
        raise ValueError(f"El nonce debe tener {NONCE_LENGTH} bytes.")
    if len(tag) != TAG_LENGTH:
        raise ValueError(f"El tag debe tener {TAG_LENGTH} bytes.")
    return bytes(nonce) + bytes(tag) + bytes(ciphertext)
