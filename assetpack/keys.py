# --------------------------------------------------------------
# File: keys.py
# Description: Utilidades para generar y leer claves en formato hexadecimal.
# --------------------------------------------------------------
"""Conversión de claves entre bytes y texto hexadecimal."""

import binascii

from assetpack.crypto_sym import check_key, secure_random
from assetpack.format import KEY_LENGTH


def generate_key() -> bytes:
    """Genera una clave AES-256 nueva con el generador seguro del sistema."""

    return secure_random(KEY_LENGTH)


def key_to_hex(key: bytes) -> str:
    """Representa la clave como texto hexadecimal en minúsculas."""

    check_key(key)
    return bytes(key).hex()


def key_from_hex(text: str) -> bytes:
    """Interpreta una clave escrita en hexadecimal.

    Args:
        text (str): Clave en hexadecimal; se ignoran espacios y saltos de línea.

    Returns:
        bytes: Clave de 32 bytes.

    Raises:
        ValueError: Si el texto no es hexadecimal válido.
        InvalidKeyLength: Si la clave decodificada no mide 32 bytes.

    """

    compact = "".join(text.split())
    try:
        key = binascii.unhexlify(compact)
    except (binascii.Error, ValueError):
        # El mensaje no reproduce el texto recibido.
        raise ValueError("La clave no es un valor hexadecimal válido.") from None
    check_key(key)
    return key
