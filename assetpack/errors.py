# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores del empaquetado y desempaquetado.
# --------------------------------------------------------------
"""Excepciones que la capa de empaquetado devuelve a quien la invoca."""


class AssetPackError(Exception):
    """Error base de todas las operaciones de `assetpack`."""


class InvalidKeyLength(AssetPackError, ValueError):
    """La clave no tiene exactamente la longitud exigida por el cifrador.

    Es un error de configuración: la clave nunca se rellena ni se recorta.
    """

    def __init__(self, length: int, expected: int = 32):
        self.length = length
        self.expected = expected
        # Solo se informa la longitud, jamás el contenido de la clave.
        super().__init__(f"La clave debe tener {expected} bytes, se recibieron {length}.")


class TruncatedInput(AssetPackError, ValueError):
    """El archivo empaquetado es más corto que nonce + tag."""

    def __init__(self, length: int, minimum: int = 28):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Archivo empaquetado truncado: mínimo {minimum} bytes, se recibieron {length}."
        )


class AuthenticationFailed(AssetPackError):
    """La etiqueta de autenticación no verifica.

    El mensaje es siempre el mismo: no distingue corrupción, manipulación
    o clave incorrecta.
    """

    MESSAGE = "No se ha podido autenticar el asset empaquetado."

    def __init__(self):
        super().__init__(self.MESSAGE)


class RandomSourceUnavailable(AssetPackError, RuntimeError):
    """El generador aleatorio seguro del sistema no está disponible."""


class KeyNotConfigured(AssetPackError):
    """No hay clave configurada en el entorno."""
