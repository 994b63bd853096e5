# --------------------------------------------------------------
# File: models.py
# Description: Modelo del paquete cifrado y su codificación binaria/Base64.
# --------------------------------------------------------------
"""Modelo Pydantic que encapsula el formato del paquete cifrado."""

from __future__ import annotations

import base64
import binascii
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from sealkit.crypto_sym import IV_LENGTH, TAG_LENGTH
from sealkit.errors import DecodingError

SALT_LENGTH = 64
HEADER_LENGTH = SALT_LENGTH + IV_LENGTH + TAG_LENGTH


class EncryptedPackage(BaseModel):
    """Representa un paquete `salt ‖ iv ‖ tag ‖ ciphertext`.

    El orden y los tamaños son fijos para mantener la compatibilidad con los
    paquetes ya almacenados: salt en el offset 0 (64 bytes), IV en el 64
    (16 bytes), tag en el 80 (16 bytes) y ciphertext desde el 96.

    Attributes:
        salt (bytes): Salt usada en la derivación PBKDF2.
        iv (bytes): Vector de inicialización de AES-GCM.
        tag (bytes): Etiqueta de autenticación generada por AES-GCM.
        ciphertext (bytes): Datos cifrados sin etiqueta.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes
    iv: bytes
    tag: bytes
    ciphertext: bytes

    @field_validator("salt")
    @classmethod
    def _check_salt(cls, value: bytes) -> bytes:
        if len(value) != SALT_LENGTH:
            raise ValueError(f"salt debe tener {SALT_LENGTH} bytes")
        return value

    @field_validator("iv")
    @classmethod
    def _check_iv(cls, value: bytes) -> bytes:
        if len(value) != IV_LENGTH:
            raise ValueError(f"iv debe tener {IV_LENGTH} bytes")
        return value

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: bytes) -> bytes:
        if len(value) != TAG_LENGTH:
            raise ValueError(f"tag debe tener {TAG_LENGTH} bytes")
        return value

    def to_bytes(self) -> bytes:
        """Concatena los campos en el orden fijo del formato."""

        return self.salt + self.iv + self.tag + self.ciphertext

    @classmethod
    def from_bytes(cls, raw: bytes) -> EncryptedPackage:
        """Separa un paquete binario en sus campos mediante offsets fijos.

        Args:
            raw (bytes): Paquete ya decodificado de Base64.

        Returns:
            EncryptedPackage: Campos extraídos del paquete.

        Raises:
            DecodingError: Si el paquete no alcanza la longitud de la cabecera.

        """

        if len(raw) < HEADER_LENGTH:
            raise DecodingError(
                f"Paquete demasiado corto: {len(raw)} bytes (mínimo {HEADER_LENGTH})."
            )
        return cls(
            salt=raw[:SALT_LENGTH],
            iv=raw[SALT_LENGTH : SALT_LENGTH + IV_LENGTH],
            tag=raw[SALT_LENGTH + IV_LENGTH : HEADER_LENGTH],
            ciphertext=raw[HEADER_LENGTH:],
        )

    def encode(self) -> str:
        """Devuelve la representación Base64 estándar del paquete."""

        return base64.b64encode(self.to_bytes()).decode("ascii")

    @classmethod
    def decode(cls, encoded: Union[str, bytes]) -> EncryptedPackage:
        """Decodifica la representación Base64 de un paquete.

        Solo se aceptan codificaciones canónicas: cualquier carácter ajeno al
        alfabeto, relleno incorrecto o bits sobrantes distintos de cero se
        rechazan.

        Args:
            encoded (Union[str, bytes]): Paquete en Base64.

        Returns:
            EncryptedPackage: Paquete con sus campos separados.

        Raises:
            DecodingError: Si el texto no es Base64 válido o es demasiado corto.

        """

        if isinstance(encoded, str):
            try:
                encoded = encoded.encode("ascii")
            except UnicodeEncodeError as exc:
                raise DecodingError("El paquete contiene caracteres no ASCII.") from exc
        elif not isinstance(encoded, bytes):
            raise DecodingError(f"Tipo de paquete no soportado: {type(encoded).__name__}")

        try:
            raw = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecodingError("El paquete no es Base64 válido.") from exc
        if base64.b64encode(raw) != encoded:
            raise DecodingError("El paquete no está en Base64 canónico.")
        return cls.from_bytes(raw)
