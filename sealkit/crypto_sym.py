# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico AES-256-GCM sobre una clave explícita."""

import os
from typing import Optional, Tuple, Union

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

IV_LENGTH = 16
TAG_LENGTH = 16

KeyBytes = Union[bytes, bytearray]


def aes_gcm_encrypt_with_key(
    key: KeyBytes,
    plaintext: bytes,
    iv: Optional[bytes] = None,
    aad: Optional[bytes] = None,
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave proporcionada.

    Args:
        key (KeyBytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.
        iv (Optional[bytes]): Vector de inicialización; si se omite se generan
            `IV_LENGTH` bytes aleatorios.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, IV y tag.

    """

    if iv is None:
        iv = os.urandom(IV_LENGTH)
    aes = AESGCM(key)
    ct_full = aes.encrypt(iv, plaintext, aad)
    tag = ct_full[-TAG_LENGTH:]
    ciphertext = ct_full[:-TAG_LENGTH]
    return ciphertext, iv, tag


def aes_gcm_decrypt_with_key(
    key: KeyBytes,
    iv: bytes,
    ciphertext: bytes,
    tag: bytes,
    aad: Optional[bytes] = None,
) -> bytes:
    """Descifra datos con AES-GCM utilizando la clave simétrica proporcionada.

    Args:
        key (KeyBytes): Clave simétrica que protege los datos.
        iv (bytes): Vector de inicialización usado al cifrar.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la etiqueta no verifica.

    """

    aes = AESGCM(key)
    return aes.decrypt(iv, ciphertext + tag, aad)
