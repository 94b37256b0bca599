# --------------------------------------------------------------
# File: storage.py
# Description: Lectura completa y escritura atómica de archivos binarios.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para archivos de assets."""

from __future__ import annotations

import os
import tempfile

__all__ = ["read_bytes", "write_bytes_atomic"]


def _ensure_parent_dir(path: str) -> str:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)
    return parent


def read_bytes(path: str) -> bytes:
    """Lee un archivo binario completo en memoria."""

    with open(path, "rb") as handler:
        return handler.read()


def write_bytes_atomic(data: bytes, path: str) -> None:
    """Guarda un archivo binario aplicando escritura atómica.

    Cada escritura usa su propio temporal en el directorio de destino, de
    modo que escrituras concurrentes sobre la misma ruta no se pisan.

    Args:
        data (bytes): Contenido a persistir.
        path (str): Ruta de destino; se sustituye solo al completar la escritura.

    """

    parent = _ensure_parent_dir(path)
    handler = tempfile.NamedTemporaryFile(
        dir=parent, prefix=f".{os.path.basename(path)}.", suffix=".tmp", delete=False
    )
    tmp_path = handler.name
    try:
        with handler:
            handler.write(data)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
