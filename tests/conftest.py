# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y recargar módulos.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

TEST_SECRET = "test-app-secret"


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Fija APP_SECRET y recarga sealkit.config para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("APP_SECRET", TEST_SECRET)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    import sealkit.config as config_module

    importlib.reload(config_module)

    yield
