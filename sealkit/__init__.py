# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete sealkit.
# --------------------------------------------------------------
"""Inicializa el paquete `sealkit` y expone sus cuatro operaciones públicas."""

from sealkit.crypto_utils import decrypt, encrypt, generate_token, hash_sha256
from sealkit.errors import AuthenticationError, CryptoError, DecodingError, SealkitError

__all__ = [
    "AuthenticationError",
    "CryptoError",
    "DecodingError",
    "SealkitError",
    "decrypt",
    "encrypt",
    "generate_token",
    "hash_sha256",
]
