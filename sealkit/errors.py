# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de la utilidad criptográfica.
# --------------------------------------------------------------
"""Errores lanzados por las operaciones de cifrado, descifrado y tokens."""

__all__ = [
    "AuthenticationError",
    "CryptoError",
    "DecodingError",
    "SealkitError",
]


class SealkitError(Exception):
    """Base común de todos los errores del paquete."""


class CryptoError(SealkitError):
    """Fallo de una primitiva, parámetros rechazados o fuente aleatoria agotada."""


class DecodingError(SealkitError):
    """Paquete malformado: Base64 inválido o longitud insuficiente.

    Indica datos corruptos; reintentar con otra passphrase no servirá.
    """


class AuthenticationError(SealkitError):
    """La verificación del tag GCM ha fallado.

    La causa puede ser una passphrase incorrecta o un paquete manipulado;
    GCM no permite distinguir ambos casos.
    """
