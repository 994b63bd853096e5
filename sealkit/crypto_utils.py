# --------------------------------------------------------------
# File: crypto_utils.py
# Description: Cifrado con passphrase, tokens aleatorios y hashes SHA-256.
# --------------------------------------------------------------
"""Operaciones públicas de la utilidad criptográfica.

El paquete cifrado tiene el formato `salt (64) ‖ iv (16) ‖ tag (16) ‖ ciphertext`
codificado en Base64. Los algoritmos son fijos (AES-256-GCM,
PBKDF2-HMAC-SHA512 con 100 000 iteraciones y SHA-256) y el paquete no lleva
byte de versión: cambiar cualquier constante rompe la compatibilidad con los
paquetes existentes.
"""

from __future__ import annotations

import hashlib
import logging
import os
import secrets
from typing import Union

from cryptography.exceptions import InvalidTag

from sealkit.crypto_kdf import ITERATIONS, KEY_LENGTH, derive_key, wipe
from sealkit.crypto_sym import (
    IV_LENGTH,
    TAG_LENGTH,
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
)
from sealkit.errors import AuthenticationError, CryptoError, DecodingError
from sealkit.models import HEADER_LENGTH, SALT_LENGTH, EncryptedPackage

__all__ = [
    "DEFAULT_TOKEN_LENGTH",
    "HEADER_LENGTH",
    "ITERATIONS",
    "IV_LENGTH",
    "KEY_LENGTH",
    "SALT_LENGTH",
    "TAG_LENGTH",
    "decrypt",
    "encrypt",
    "generate_token",
    "hash_sha256",
]

DEFAULT_TOKEN_LENGTH = 32

logger = logging.getLogger(__name__)


def _random_bytes(size: int) -> bytes:
    """Lee bytes de la fuente aleatoria del sistema."""

    try:
        return os.urandom(size)
    except (NotImplementedError, OSError) as exc:
        raise CryptoError("Fuente aleatoria segura no disponible.") from exc


def _utf8(value: str, name: str) -> bytes:
    """Codifica un argumento de texto en UTF-8 validando su tipo."""

    if not isinstance(value, str):
        raise TypeError(f"{name} debe ser str")
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError(f"{name} no se puede codificar en UTF-8") from exc


def encrypt(plaintext: str, password: str) -> str:
    """Cifra un texto con una clave derivada de la passphrase.

    Cada llamada usa salt e IV nuevos, así que el mismo texto y passphrase
    producen paquetes distintos; nunca compares paquetes para comparar textos.

    Args:
        plaintext (str): Texto en claro; se admite la cadena vacía.
        password (str): Passphrase de cifrado.

    Returns:
        str: Paquete cifrado en Base64.

    Raises:
        TypeError: Si `plaintext` o `password` no son cadenas.
        ValueError: Si alguno contiene caracteres no codificables en UTF-8.
        CryptoError: Si falla la fuente aleatoria o la primitiva de cifrado.

    """

    data = _utf8(plaintext, "plaintext")
    secret = _utf8(password, "password")

    salt = _random_bytes(SALT_LENGTH)
    iv = _random_bytes(IV_LENGTH)
    key = derive_key(secret, salt, iterations=ITERATIONS, length=KEY_LENGTH)
    try:
        ciphertext, iv, tag = aes_gcm_encrypt_with_key(key, data, iv=iv)
    except (ValueError, OverflowError) as exc:
        raise CryptoError("La primitiva AES-GCM rechazó los parámetros.") from exc
    finally:
        wipe(key)

    package = EncryptedPackage(salt=salt, iv=iv, tag=tag, ciphertext=ciphertext)
    logger.debug("Texto cifrado: %d bytes de ciphertext", len(ciphertext))
    return package.encode()


def decrypt(package: Union[str, bytes], password: str) -> str:
    """Descifra un paquete producido por `encrypt`.

    El descifrado es todo o nada: o se devuelve el texto original completo o
    se lanza una excepción.

    Args:
        package (Union[str, bytes]): Paquete cifrado en Base64.
        password (str): Passphrase usada al cifrar.

    Returns:
        str: Texto original.

    Raises:
        TypeError: Si `password` no es una cadena.
        ValueError: Si `password` no se puede codificar en UTF-8.
        DecodingError: Si el paquete está malformado.
        AuthenticationError: Si la passphrase no coincide o el paquete fue
            alterado.
        CryptoError: Si la primitiva rechaza los parámetros.

    """

    secret = _utf8(password, "password")
    parts = EncryptedPackage.decode(package)
    key = derive_key(secret, parts.salt, iterations=ITERATIONS, length=KEY_LENGTH)
    try:
        data = aes_gcm_decrypt_with_key(key, parts.iv, parts.ciphertext, parts.tag)
    except InvalidTag as exc:
        logger.debug("Verificación del tag GCM fallida")
        raise AuthenticationError(
            "Passphrase incorrecta o paquete manipulado."
        ) from exc
    except (ValueError, OverflowError) as exc:
        raise CryptoError("La primitiva AES-GCM rechazó los parámetros.") from exc
    finally:
        wipe(key)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodingError("El texto descifrado no es UTF-8 válido.") from exc


def generate_token(length: int = DEFAULT_TOKEN_LENGTH) -> str:
    """Genera un token aleatorio codificado en hexadecimal.

    Args:
        length (int): Número de bytes aleatorios; el token tiene el doble de
            caracteres.

    Returns:
        str: Token hexadecimal de `2 * length` caracteres.

    Raises:
        ValueError: Si `length` no es un entero positivo.
        CryptoError: Si la fuente aleatoria no está disponible.

    """

    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValueError(f"length debe ser un entero positivo, no {length!r}")
    try:
        return secrets.token_hex(length)
    except (NotImplementedError, OSError) as exc:
        raise CryptoError("Fuente aleatoria segura no disponible.") from exc


def hash_sha256(data: Union[str, bytes]) -> str:
    """Calcula el SHA-256 de `data` en hexadecimal.

    Sirve para huellas de contenido, no para almacenar contraseñas.
    """

    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()
