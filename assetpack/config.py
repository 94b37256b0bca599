# --------------------------------------------------------------
# File: config.py
# Description: Configuración por variables de entorno y archivo .env.
# --------------------------------------------------------------
"""Valores configurables del empaquetado; la clave nunca tiene valor por defecto."""

import os

from dotenv import load_dotenv

from assetpack.errors import KeyNotConfigured
from assetpack.keys import key_from_hex

load_dotenv()

KEY_ENV = "ASSET_KEY"
ASSET_INPUT = os.getenv("ASSET_INPUT", os.path.join("public", "model.glb"))
ASSET_OUTPUT = os.getenv("ASSET_OUTPUT", os.path.join("public", "model.enc"))
LOG_LEVEL = os.getenv("ASSETPACK_LOG_LEVEL", "INFO").upper()


def load_key(env_var: str = KEY_ENV) -> bytes:
    """Lee la clave hexadecimal de una variable de entorno.

    Args:
        env_var (str): Nombre de la variable que contiene la clave.

    Returns:
        bytes: Clave de 32 bytes.

    Raises:
        KeyNotConfigured: Si la variable no existe o está vacía.
        InvalidKeyLength: Si la clave no mide 32 bytes.

    """

    value = os.getenv(env_var, "").strip()
    if not value:
        raise KeyNotConfigured(f"La variable {env_var} no contiene ninguna clave.")
    return key_from_hex(value)
