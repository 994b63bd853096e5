# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC-SHA512.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir de la passphrase del usuario."""

from typing import Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

ITERATIONS = 100_000
KEY_LENGTH = 32


def derive_key(
    password: Union[str, bytes],
    salt: bytes,
    *,
    iterations: int = ITERATIONS,
    length: int = KEY_LENGTH,
) -> bytearray:
    """Deriva una clave simétrica con PBKDF2-HMAC-SHA512.

    Args:
        password (Union[str, bytes]): Passphrase del usuario; el texto se
            codifica en UTF-8.
        salt (bytes): Salt aleatoria que acompaña al paquete cifrado.
        iterations (int): Número de iteraciones de PBKDF2.
        length (int): Longitud en bytes de la clave resultante.

    Returns:
        bytearray: Clave derivada en un buffer mutable para poder borrarla.

    """

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA512(),
        length=length,
        salt=salt,
        iterations=iterations,
    )
    if isinstance(password, str):
        password = password.encode("utf-8")
    return bytearray(kdf.derive(password))


def wipe(buffer: bytearray) -> None:
    """Sobrescribe con ceros un buffer con material de clave."""

    for i in range(len(buffer)):
        buffer[i] = 0
