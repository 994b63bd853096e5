# --------------------------------------------------------------
# File: vault.py
# Description: Sellado de valores y campos sensibles con el secreto de la app.
# --------------------------------------------------------------
"""Ayudas para proteger valores antes de guardarlos o enviarlos.

Usan `APP_SECRET` como passphrase cuando el llamador no aporta una propia.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Any, Dict, Iterable, Optional

from sealkit import config
from sealkit.crypto_utils import decrypt, encrypt, hash_sha256

__all__ = ["fingerprint", "seal_fields", "seal_value", "unseal_fields", "unseal_value"]

logger = logging.getLogger(__name__)


def _secret(secret: Optional[str]) -> str:
    return config.APP_SECRET if secret is None else secret


def seal_value(value: str, secret: Optional[str] = None) -> str:
    """Cifra un valor con la passphrase indicada o con `APP_SECRET`."""

    return encrypt(value, _secret(secret))


def unseal_value(package: str, secret: Optional[str] = None) -> str:
    """Descifra un valor sellado con `seal_value`."""

    return decrypt(package, _secret(secret))


def seal_fields(
    record: Dict[str, Any], fields: Iterable[str], secret: Optional[str] = None
) -> Dict[str, Any]:
    """Devuelve una copia del registro con los campos indicados cifrados.

    Args:
        record (Dict[str, Any]): Registro original; no se modifica.
        fields (Iterable[str]): Nombres de los campos a cifrar.
        secret (Optional[str]): Passphrase; por defecto `APP_SECRET`.

    Returns:
        Dict[str, Any]: Copia con los campos presentes y no nulos cifrados.

    Raises:
        TypeError: Si alguno de los campos no contiene texto.

    """

    password = _secret(secret)
    sealed = dict(record)
    count = 0
    for name in fields:
        value = sealed.get(name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise TypeError(f"El campo {name!r} debe ser str para cifrarse")
        sealed[name] = encrypt(value, password)
        count += 1
    logger.debug("Campos sellados: %d", count)
    return sealed


def unseal_fields(
    record: Dict[str, Any], fields: Iterable[str], secret: Optional[str] = None
) -> Dict[str, Any]:
    """Devuelve una copia del registro con los campos indicados descifrados.

    Args:
        record (Dict[str, Any]): Registro con campos sellados.
        fields (Iterable[str]): Nombres de los campos a descifrar.
        secret (Optional[str]): Passphrase; por defecto `APP_SECRET`.

    Returns:
        Dict[str, Any]: Copia con los campos presentes y no nulos en claro.

    """

    password = _secret(secret)
    opened = dict(record)
    for name in fields:
        value = opened.get(name)
        if value is None:
            continue
        opened[name] = decrypt(value, password)
    return opened


def fingerprint(value: str) -> str:
    """Huella SHA-256 para buscar valores sellados por igualdad.

    El valor se normaliza (Unicode NFKC, sin espacios en los extremos y sin
    distinguir mayúsculas) para que `" Ana@Mail.com"` y `"ana@mail.com"`
    compartan huella aunque sus paquetes cifrados sean distintos.

    Args:
        value (str): Valor en claro que se sella aparte.

    Returns:
        str: SHA-256 hexadecimal del valor normalizado.

    """

    normalized = unicodedata.normalize("NFKC", value).strip().casefold()
    return hash_sha256(normalized)
