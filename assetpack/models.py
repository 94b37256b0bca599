# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del archivo empaquetado y de sus resultados.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan las estructuras del empaquetado."""

from pydantic import BaseModel, field_validator

from assetpack.format import NONCE_LENGTH, TAG_LENGTH, join_packaged, split_packaged


class PackagedAsset(BaseModel):
    """Representa un asset cifrado dividido en sus tres regiones.

    Attributes:
        nonce (bytes): Vector de inicialización de 96 bits.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        ciphertext (bytes): Datos cifrados, misma longitud que el claro.

    """

    nonce: bytes
    tag: bytes
    ciphertext: bytes

    @field_validator("nonce")
    @classmethod
    def _check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_LENGTH:
            raise ValueError(f"El nonce debe tener {NONCE_LENGTH} bytes.")
        return value

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: bytes) -> bytes:
        if len(value) != TAG_LENGTH:
            raise ValueError(f"El tag debe tener {TAG_LENGTH} bytes.")
        return value

    @classmethod
    def from_bytes(cls, packaged: bytes) -> "PackagedAsset":
        """Construye el modelo a partir del contenido de un archivo empaquetado."""

        nonce, tag, ciphertext = split_packaged(packaged)
        return cls(nonce=nonce, tag=tag, ciphertext=ciphertext)

    def to_bytes(self) -> bytes:
        """Serializa el modelo como `nonce || tag || ciphertext`."""

        return join_packaged(self.nonce, self.tag, self.ciphertext)


class PackResult(BaseModel):
    """Resumen de una operación de empaquetado sobre disco.

    Attributes:
        input_path (str): Archivo en claro leído.
        output_path (str): Archivo empaquetado escrito.
        plaintext_size (int): Tamaño del claro en bytes.
        packaged_size (int): Tamaño del archivo empaquetado en bytes.

    """

    input_path: str
    output_path: str
    plaintext_size: int
    packaged_size: int
