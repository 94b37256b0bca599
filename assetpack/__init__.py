# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del empaquetado cifrado de assets.
# --------------------------------------------------------------
"""Inicializa el paquete `assetpack` y expone sus operaciones principales."""

from assetpack.errors import (
    AssetPackError,
    AuthenticationFailed,
    InvalidKeyLength,
    KeyNotConfigured,
    RandomSourceUnavailable,
    TruncatedInput,
)
from assetpack.format import HEADER_LENGTH, KEY_LENGTH, NONCE_LENGTH, TAG_LENGTH
from assetpack.packager import package, package_file
from assetpack.unpackager import unpackage, unpackage_file

__all__ = [
    "AssetPackError",
    "AuthenticationFailed",
    "HEADER_LENGTH",
    "InvalidKeyLength",
    "KEY_LENGTH",
    "KeyNotConfigured",
    "NONCE_LENGTH",
    "RandomSourceUnavailable",
    "TAG_LENGTH",
    "TruncatedInput",
    "package",
    "package_file",
    "unpackage",
    "unpackage_file",
]
