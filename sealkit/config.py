# --------------------------------------------------------------
# File: config.py
# Description: Configuración por entorno y arranque del logging del paquete.
# --------------------------------------------------------------
"""Valores de configuración leídos del entorno (y de `.env` si existe)."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

APP_SECRET = os.getenv("APP_SECRET", "change_this_dev_secret")
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

HANDLER_NAME = "sealkit"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configura el logger raíz del paquete `sealkit`.

    Args:
        level (Optional[str]): Nivel explícito; si se omite se usa `LOG_LEVEL`.

    Returns:
        logging.Logger: Logger `sealkit` ya configurado.

    """

    logger = logging.getLogger("sealkit")
    logger.setLevel((level or LOG_LEVEL).upper())
    # Un único handler aunque se llame varias veces.
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger
